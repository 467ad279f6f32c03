"""Normalized file type tag."""

from enum import StrEnum


class FileType(StrEnum):
    """File types accepted for review."""

    PDF = "pdf"
    DOCX = "docx"
    TXT = "txt"
    UNKNOWN = "unknown"
