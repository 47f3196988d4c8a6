"""Seller verification document endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, File, Response, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

from findora.api.deps import get_current_seller, get_db, get_object_store
from findora.api.schemas.documents import (
    DocumentChecklist,
    DocumentSubmitResponse,
    DocumentUploadResponse,
    SellerDocumentOut,
)
from findora.core.config import settings
from findora.core.constants import DocumentType
from findora.db.models.seller_document import SellerDocument
from findora.db.models.seller_profile import SellerProfile
from findora.onboarding import verification
from findora.onboarding.documents import (
    document_label,
    missing_required_documents,
    required_document_types,
)
from findora.storage.object_store import ObjectStore

router = APIRouter(prefix="/seller/documents", tags=["Seller Documents"])


def document_out(document: SellerDocument) -> SellerDocumentOut:
    return SellerDocumentOut(
        document_type=document.document_type,
        label=document_label(document.document_type),
        filename=document.filename,
        content_type=document.content_type,
        size_bytes=document.size_bytes,
        sha256=document.sha256,
        uploaded_at=document.uploaded_at,
    )


def build_checklist(profile: SellerProfile, documents: list[SellerDocument]) -> DocumentChecklist:
    return DocumentChecklist(
        documents=[document_out(document) for document in documents],
        required_types=required_document_types(),
        missing_required=missing_required_documents(document.document_type for document in documents),
        submitted_at=profile.documents_submitted_at,
    )


@router.get("", response_model=DocumentChecklist)
async def list_documents(
    db: AsyncSession = Depends(get_db),
    profile: SellerProfile = Depends(get_current_seller),
) -> DocumentChecklist:
    """Uploaded documents and what is still required."""
    documents = await verification.list_documents(db, profile)
    return build_checklist(profile, documents)


@router.put("/{document_type}", response_model=DocumentUploadResponse)
async def upload_document(
    document_type: DocumentType,
    file: UploadFile = File(...),
    db: AsyncSession = Depends(get_db),
    store: ObjectStore = Depends(get_object_store),
    profile: SellerProfile = Depends(get_current_seller),
) -> DocumentUploadResponse:
    """Upload (or replace) the document of one type."""
    # One byte past the limit is enough to reject an oversized file
    data = await file.read(settings.MAX_DOCUMENT_SIZE_BYTES + 1)
    filename = file.filename or "document"
    document = await verification.upload_document(
        db,
        store,
        profile,
        document_type,
        filename=filename,
        content_type=file.content_type,
        data=data,
        max_bytes=settings.MAX_DOCUMENT_SIZE_BYTES,
    )
    return DocumentUploadResponse(
        message=f"{filename} uploaded successfully",
        document=document_out(document),
    )


@router.delete("/{document_type}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_document(
    document_type: DocumentType,
    db: AsyncSession = Depends(get_db),
    store: ObjectStore = Depends(get_object_store),
    profile: SellerProfile = Depends(get_current_seller),
) -> Response:
    """Remove an uploaded document."""
    await verification.remove_document(db, store, profile, document_type)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/submit", response_model=DocumentSubmitResponse)
async def submit_documents(
    db: AsyncSession = Depends(get_db),
    profile: SellerProfile = Depends(get_current_seller),
) -> DocumentSubmitResponse:
    """Hand the document set to review once every required type is present."""
    profile = await verification.submit_documents(db, profile)
    return DocumentSubmitResponse(
        message="Documents uploaded successfully! Your verification is under review.",
        submitted_at=profile.documents_submitted_at,
    )
