"""Supported document media types and file signature checks."""

from pathlib import PurePath
from typing import Optional

PDF = "application/pdf"
DOC = "application/msword"
DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

SUPPORTED_MEDIA_TYPES = frozenset({PDF, DOC, DOCX})

_EXTENSION_MEDIA_TYPES = {
    ".pdf": PDF,
    ".doc": DOC,
    ".docx": DOCX,
}

PDF_SIGNATURE = b"%PDF-"
OLE2_SIGNATURE = bytes([0xD0, 0xCF, 0x11, 0xE0, 0xA1, 0xB1, 0x1A, 0xE1])
ZIP_SIGNATURE = b"PK"
DOCX_MARKER = b"[Content_Types].xml"


def canonical_media_type(media_type: Optional[str]) -> str:
    """Lower-case a media type and drop parameters such as charset."""
    if not media_type:
        return ""
    return media_type.split(";", 1)[0].strip().lower()


def media_type_for_filename(filename: str) -> Optional[str]:
    """Map a filename's extension to a supported media type.

    Example:
        >>> media_type_for_filename("Jane_Doe.DOCX")
        'application/vnd.openxmlformats-officedocument.wordprocessingml.document'
    """
    return _EXTENSION_MEDIA_TYPES.get(PurePath(filename).suffix.lower())


def signature_error(content: bytes, media_type: str) -> Optional[str]:
    """Check that content starts with the magic bytes of its media type.

    Args:
        content: Raw document bytes
        media_type: Canonical media type

    Returns:
        Human-readable reason when the signature is wrong, None when it looks valid
    """
    if media_type == PDF:
        if not content.startswith(PDF_SIGNATURE):
            return "Invalid PDF file - missing PDF signature"
    elif media_type == DOC:
        if not content.startswith(OLE2_SIGNATURE):
            return "Invalid DOC file - missing OLE2 signature"
    elif media_type == DOCX:
        if not content.startswith(ZIP_SIGNATURE):
            return "Invalid DOCX file - not a valid ZIP archive"
        if DOCX_MARKER not in content:
            return "Invalid DOCX file - missing required content"
    return None
