"""Document DTOs."""

from dataclasses import dataclass, field


@dataclass
class DocumentUploadInput:
    """Input for uploading a document."""

    file_name: str
    content: bytes
    mime_type: str
    title: str | None = None
    authors: list[str] = field(default_factory=list)
    abstract: str = ""
    keywords: list[str] = field(default_factory=list)


@dataclass
class DocumentMetadataUpdate:
    """Metadata edit; ``None`` leaves a field unchanged."""

    title: str | None = None
    authors: list[str] | None = None
    abstract: str | None = None
    keywords: list[str] | None = None
