"""Document byte sources used to fetch uploaded files by opaque key."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol, Union

from .exceptions import ExtractionFailedError, UnsupportedMediaTypeError
from .media_types import media_type_for_filename


@dataclass(frozen=True)
class StoredDocument:
    """Raw bytes of an uploaded document plus its declared media type."""

    content: bytes
    media_type: str


class DocumentSource(Protocol):
    """Read-only access to uploaded document bytes."""

    def fetch(self, document_key: str, media_type: Optional[str] = None) -> StoredDocument:
        """Return the bytes and media type stored under document_key."""
        ...


class LocalDocumentStore:
    """DocumentSource backed by files under a root directory.

    Document keys are paths relative to the root. The media type is taken
    from the caller when given, otherwise inferred from the file extension.
    """

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root).resolve()

    def fetch(self, document_key: str, media_type: Optional[str] = None) -> StoredDocument:
        """Read a document from disk.

        Raises:
            ExtractionFailedError: If the key escapes the root or the file is unreadable
            UnsupportedMediaTypeError: If no media type is given or inferable
        """
        path = (self.root / document_key).resolve()
        if not path.is_relative_to(self.root):
            raise ExtractionFailedError(f"Document key outside document root: {document_key}")

        resolved_type = media_type or media_type_for_filename(path.name)
        if not resolved_type:
            raise UnsupportedMediaTypeError(
                f"Cannot determine media type for document: {document_key}"
            )

        try:
            content = path.read_bytes()
        except OSError as e:
            raise ExtractionFailedError(
                f"Failed to read document {document_key}: {e}", media_type=resolved_type
            ) from e

        return StoredDocument(content=content, media_type=resolved_type)
