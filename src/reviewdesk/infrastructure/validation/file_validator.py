"""MIME-type and size based file validator."""

from reviewdesk.application.ports import FileValidation
from reviewdesk.domain.value_objects import FileType

ALLOWED_TYPES: dict[str, FileType] = {
    "application/pdf": FileType.PDF,
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": FileType.DOCX,
    "text/plain": FileType.TXT,
}

DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024


def format_file_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


class MimeTypeFileValidator:
    """Accepts PDF, DOCX and plain text files up to ``max_size`` bytes."""

    def __init__(self, max_size: int = DEFAULT_MAX_FILE_SIZE) -> None:
        self._max_size = max_size

    def validate(self, file_name: str, mime_type: str, size: int) -> FileValidation:
        errors = []
        file_type = ALLOWED_TYPES.get((mime_type or "").split(";")[0].strip().lower())
        if file_type is None:
            errors.append("File type not allowed. Use PDF, DOCX or TXT")
        if size > self._max_size:
            errors.append(
                f"File exceeds {format_file_size(self._max_size)} (size: {format_file_size(size)})"
            )
        if not file_name or ".." in file_name or "/" in file_name:
            errors.append("Invalid file name")
        return FileValidation(
            valid=not errors,
            file_type=file_type or FileType.UNKNOWN,
            file_size=size,
            file_name=file_name,
            errors=errors,
        )
