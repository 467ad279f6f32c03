"""Review workflow states."""

from enum import StrEnum


class ReviewStatus(StrEnum):
    """States a document moves through during review."""

    PENDING = "pending"
    IN_REVIEW = "in_review"
    REVIEW_COMPLETE = "review_complete"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
