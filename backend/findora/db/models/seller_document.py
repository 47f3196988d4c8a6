"""
SellerDocument — one stored verification file per seller per document type.

Re-uploading a type replaces the row in place; `storage_key` points at the
object in the document bucket.
"""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from findora.db.models.base import Base, generate_uuid, utcnow


class SellerDocument(Base):
    """Durable reference to an uploaded verification document."""

    __tablename__ = "seller_documents"
    __table_args__ = (
        UniqueConstraint("seller_profile_id", "document_type", name="uq_seller_documents_profile_type"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=generate_uuid)
    seller_profile_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("seller_profiles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    document_type: Mapped[str] = mapped_column(String(50), nullable=False)

    # ── File identity ─────────────────────────
    filename: Mapped[str] = mapped_column(String(500), nullable=False)
    content_type: Mapped[str] = mapped_column(String(100), nullable=False)
    size_bytes: Mapped[int] = mapped_column(Integer, nullable=False)
    sha256: Mapped[str] = mapped_column(String(64), nullable=False)
    storage_key: Mapped[str] = mapped_column(String(1000), nullable=False)

    uploaded_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )

    def __repr__(self) -> str:
        return f"<SellerDocument {self.document_type} {self.filename} seller={self.seller_profile_id}>"
