"""
Verification document rules shared by clients and the upload API.

A client stages one file per document type with `DocumentStaging`; the API
re-checks every upload with `validate_document_file` and `sniff_content_type`
before anything reaches object storage.
"""

from __future__ import annotations

import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from findora.core.constants import (
    ALLOWED_DOCUMENT_CONTENT_TYPES,
    DOCUMENT_REQUIREMENTS,
    DocumentType,
)
from findora.core.errors import InvalidInputError

MAX_DOCUMENT_BYTES = 5 * 1024 * 1024
MAX_FILENAME_LENGTH = 255

_MAGIC_NUMBERS: tuple[tuple[bytes, str], ...] = (
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"%PDF-", "application/pdf"),
)


class DocumentRejectedError(InvalidInputError):
    """A file failed the type or size rules."""

    def __init__(self, message: str) -> None:
        super().__init__(message, errors={"formErrors": [], "fieldErrors": {"file": [message]}})


class MissingDocumentsError(InvalidInputError):
    """Submission attempted without every required document."""

    def __init__(self, missing: list[DocumentType]) -> None:
        self.missing = missing
        labels = ", ".join(document_label(document_type) for document_type in missing)
        super().__init__(f"Please upload required documents: {labels}")


def document_label(document_type: DocumentType | str) -> str:
    return DOCUMENT_REQUIREMENTS[DocumentType(document_type)][0]


def required_document_types() -> list[DocumentType]:
    return [document_type for document_type, (_, required) in DOCUMENT_REQUIREMENTS.items() if required]


def missing_required_documents(uploaded: Iterable[DocumentType | str]) -> list[DocumentType]:
    """Required types absent from `uploaded`, in catalog order."""
    present = {DocumentType(document_type) for document_type in uploaded}
    return [document_type for document_type in required_document_types() if document_type not in present]


def ensure_required_documents(uploaded: Iterable[DocumentType | str]) -> None:
    missing = missing_required_documents(uploaded)
    if missing:
        raise MissingDocumentsError(missing)


def validate_document_file(
    content_type: str | None,
    size_bytes: int,
    *,
    max_bytes: int = MAX_DOCUMENT_BYTES,
) -> str:
    """Check type then size; return the canonical content type."""
    normalized = (content_type or "").split(";")[0].strip().lower()
    if normalized not in ALLOWED_DOCUMENT_CONTENT_TYPES:
        raise DocumentRejectedError("Only JPEG, PNG, and PDF files are allowed")
    if size_bytes > max_bytes:
        raise DocumentRejectedError(f"File size must be less than {max_bytes // (1024 * 1024)}MB")
    return "image/jpeg" if normalized == "image/jpg" else normalized


def validate_document_filename(filename: str, *, max_length: int = MAX_FILENAME_LENGTH) -> str:
    if len(filename) > max_length:
        raise DocumentRejectedError(f"File name must be at most {max_length} characters")
    return filename


def sniff_content_type(data: bytes) -> str | None:
    """Content type implied by the file's leading bytes, if recognised."""
    for magic, content_type in _MAGIC_NUMBERS:
        if data.startswith(magic):
            return content_type
    return None


@dataclass(frozen=True)
class StagedDocument:
    """A validated file waiting to be uploaded."""

    document_type: DocumentType
    filename: str
    content_type: str
    size_bytes: int
    path: Path | None = None

    @property
    def label(self) -> str:
        return document_label(self.document_type)


class DocumentStaging:
    """
    Client-side set of selected documents, keyed by type.

    Staging a type again replaces the earlier file.  A rejected file leaves
    the set untouched.
    """

    def __init__(self, *, max_bytes: int = MAX_DOCUMENT_BYTES) -> None:
        self._max_bytes = max_bytes
        self._staged: dict[DocumentType, StagedDocument] = {}

    def stage(
        self,
        document_type: DocumentType | str,
        *,
        filename: str,
        content_type: str | None,
        size_bytes: int,
        path: Path | None = None,
    ) -> StagedDocument:
        content_type = validate_document_file(content_type, size_bytes, max_bytes=self._max_bytes)
        validate_document_filename(filename)
        staged = StagedDocument(
            document_type=DocumentType(document_type),
            filename=filename,
            content_type=content_type,
            size_bytes=size_bytes,
            path=path,
        )
        self._staged[staged.document_type] = staged
        return staged

    def stage_path(self, document_type: DocumentType | str, path: Path) -> StagedDocument:
        """Stage a file from disk, guessing its content type from the name."""
        content_type, _ = mimetypes.guess_type(path.name)
        return self.stage(
            document_type,
            filename=path.name,
            content_type=content_type,
            size_bytes=path.stat().st_size,
            path=path,
        )

    def remove(self, document_type: DocumentType | str) -> None:
        self._staged.pop(DocumentType(document_type), None)

    def get(self, document_type: DocumentType | str) -> StagedDocument | None:
        return self._staged.get(DocumentType(document_type))

    @property
    def staged(self) -> list[StagedDocument]:
        return list(self._staged.values())

    def missing_required(self) -> list[DocumentType]:
        return missing_required_documents(self._staged)

    def ensure_complete(self) -> list[StagedDocument]:
        """Everything staged, or MissingDocumentsError naming what is absent."""
        ensure_required_documents(self._staged)
        return self.staged

    def __len__(self) -> int:
        return len(self._staged)
