"""Domain value objects."""

from reviewdesk.domain.value_objects.encoded_content import EncodedContent
from reviewdesk.domain.value_objects.file_type import FileType
from reviewdesk.domain.value_objects.review_status import ReviewStatus

__all__ = [
    "EncodedContent",
    "FileType",
    "ReviewStatus",
]
