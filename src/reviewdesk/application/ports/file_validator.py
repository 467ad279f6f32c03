"""File validator port."""

from dataclasses import dataclass, field
from typing import Protocol

from reviewdesk.domain.value_objects import FileType


@dataclass
class FileValidation:
    """Outcome of validating a candidate upload."""

    valid: bool
    file_type: FileType
    file_size: int
    file_name: str
    errors: list[str] = field(default_factory=list)


class FileValidator(Protocol):
    """Port for accepting or rejecting a candidate file."""

    def validate(self, file_name: str, mime_type: str, size: int) -> FileValidation: ...
