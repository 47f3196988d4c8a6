"""
Server side of the verification document flow.

Uploads are re-validated here (declared type, size, and magic bytes), written
to the object store, then recorded in `seller_documents`.  The object is
stored before the row is committed; if the commit fails the new object is
deleted again, and a replaced object is deleted only after the new row is
durable.
"""

from __future__ import annotations

import re
import uuid

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from findora.core.constants import DocumentType
from findora.core.errors import ConflictError, InternalError, NotFoundError, StorageError
from findora.core.logging import get_logger
from findora.db.models.seller_document import SellerDocument
from findora.db.models.seller_profile import SellerProfile
from findora.onboarding.documents import (
    DocumentRejectedError,
    ensure_required_documents,
    sniff_content_type,
    validate_document_file,
    validate_document_filename,
)
from findora.repositories import seller_documents as document_repository
from findora.repositories import seller_profiles as seller_repository
from findora.storage.object_store import ObjectStore

logger = get_logger(__name__)

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def build_storage_key(profile_id: uuid.UUID, document_type: DocumentType, filename: str) -> str:
    """Unique object key; the original name is kept for readability only."""
    safe_name = _UNSAFE_FILENAME_CHARS.sub("_", filename).strip("._") or "document"
    return f"sellers/{profile_id}/documents/{document_type.value}/{uuid.uuid4().hex}-{safe_name[:100]}"


async def upload_document(
    db: AsyncSession,
    store: ObjectStore,
    profile: SellerProfile,
    document_type: DocumentType,
    *,
    filename: str,
    content_type: str | None,
    data: bytes,
    max_bytes: int,
) -> SellerDocument:
    """Validate, store and record one document, replacing any earlier one of the type."""
    canonical_type = validate_document_file(content_type, len(data), max_bytes=max_bytes)
    validate_document_filename(filename)
    if sniff_content_type(data) != canonical_type:
        raise DocumentRejectedError("File content does not match its declared type")

    profile_id = profile.id
    key = build_storage_key(profile_id, document_type, filename)
    stored = await store.put(key, data, canonical_type)

    try:
        document, replaced_key = await document_repository.upsert_document(
            db,
            seller_profile_id=profile_id,
            document_type=document_type.value,
            filename=filename,
            content_type=stored.content_type,
            size_bytes=stored.size_bytes,
            sha256=stored.sha256,
            storage_key=stored.key,
        )
        await db.commit()
    except IntegrityError as exc:
        # A concurrent first upload of the same type won the unique constraint
        await db.rollback()
        logger.warning(
            "Concurrent document upload rejected",
            seller_id=str(profile_id),
            document_type=document_type.value,
        )
        await store.delete(stored.key)
        raise ConflictError("This document is already being uploaded. Please try again.") from exc
    except SQLAlchemyError as exc:
        await db.rollback()
        logger.exception("Document record failed", seller_id=str(profile_id), document_type=document_type.value)
        await store.delete(stored.key)
        raise InternalError() from exc

    if replaced_key is not None:
        try:
            await store.delete(replaced_key)
        except StorageError:
            logger.warning("Replaced document left in storage", key=replaced_key)

    logger.info(
        "Seller document stored",
        seller_id=str(profile_id),
        document_type=document_type.value,
        size_bytes=stored.size_bytes,
        replaced=replaced_key is not None,
    )
    return document


async def remove_document(
    db: AsyncSession,
    store: ObjectStore,
    profile: SellerProfile,
    document_type: DocumentType,
) -> None:
    document = await document_repository.get_document(db, profile.id, document_type.value)
    if document is None:
        raise NotFoundError("Document not found")

    storage_key = document.storage_key
    await document_repository.delete_document(db, document)
    await db.commit()
    try:
        await store.delete(storage_key)
    except StorageError:
        logger.warning("Removed document left in storage", key=storage_key)
    logger.info("Seller document removed", seller_id=str(profile.id), document_type=document_type.value)


async def list_documents(db: AsyncSession, profile: SellerProfile) -> list[SellerDocument]:
    return await document_repository.list_documents(db, profile.id)


async def submit_documents(db: AsyncSession, profile: SellerProfile) -> SellerProfile:
    """Hand the document set to review; every required type must be present."""
    documents = await document_repository.list_documents(db, profile.id)
    ensure_required_documents(document.document_type for document in documents)

    await seller_repository.mark_documents_submitted(db, profile)
    await db.commit()
    logger.info("Seller documents submitted", seller_id=str(profile.id), count=len(documents))
    return profile
