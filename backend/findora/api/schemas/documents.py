"""Seller verification document schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from findora.api.schemas.common import CamelModel
from findora.core.constants import DocumentType


class SellerDocumentOut(CamelModel):
    """Stored document metadata.  The object itself is never echoed back."""

    document_type: DocumentType
    label: str
    filename: str
    content_type: str
    size_bytes: int
    sha256: str
    uploaded_at: datetime


class DocumentChecklist(CamelModel):
    documents: list[SellerDocumentOut]
    required_types: list[DocumentType]
    missing_required: list[DocumentType]
    submitted_at: datetime | None


class DocumentUploadResponse(BaseModel):
    message: str
    document: SellerDocumentOut


class DocumentSubmitResponse(CamelModel):
    message: str
    submitted_at: datetime
