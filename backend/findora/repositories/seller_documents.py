"""
Seller document repository — one row per (seller profile, document type).

Repository rules:
- Pure data-access logic only
- Every function receives AsyncSession explicitly
- Functions flush, but never commit
"""

from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from findora.db.models.base import utcnow
from findora.db.models.seller_document import SellerDocument


async def list_documents(db: AsyncSession, seller_profile_id: uuid.UUID) -> list[SellerDocument]:
    """All documents uploaded by a seller, ordered by type."""
    stmt = (
        select(SellerDocument)
        .where(SellerDocument.seller_profile_id == seller_profile_id)
        .order_by(SellerDocument.document_type)
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def get_document(
    db: AsyncSession,
    seller_profile_id: uuid.UUID,
    document_type: str,
) -> SellerDocument | None:
    """Fetch the seller's document of one type."""
    stmt = select(SellerDocument).where(
        SellerDocument.seller_profile_id == seller_profile_id,
        SellerDocument.document_type == document_type,
    )
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def upsert_document(
    db: AsyncSession,
    *,
    seller_profile_id: uuid.UUID,
    document_type: str,
    filename: str,
    content_type: str,
    size_bytes: int,
    sha256: str,
    storage_key: str,
) -> tuple[SellerDocument, str | None]:
    """Insert or replace the document of `document_type`.

    Returns the row and the storage key it replaced (None for a first upload).
    """
    document = await get_document(db, seller_profile_id, document_type)
    replaced_key: str | None = None

    if document is None:
        document = SellerDocument(
            seller_profile_id=seller_profile_id,
            document_type=document_type,
        )
        db.add(document)
    else:
        replaced_key = document.storage_key

    document.filename = filename
    document.content_type = content_type
    document.size_bytes = size_bytes
    document.sha256 = sha256
    document.storage_key = storage_key
    document.uploaded_at = utcnow()

    await db.flush()
    return document, replaced_key


async def delete_document(db: AsyncSession, document: SellerDocument) -> None:
    """Hard-delete a document row."""
    await db.delete(document)
    await db.flush()
