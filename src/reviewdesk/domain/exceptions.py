"""Domain exceptions."""


class ReviewDeskError(Exception):
    """Base exception for ReviewDesk."""

    pass


class NotFound(ReviewDeskError):
    """Requested resource was not found."""

    pass


class InvalidTransition(ReviewDeskError):
    """Status change is not permitted from the current state."""

    def __init__(self, current: str, requested: str) -> None:
        super().__init__(f"Invalid transition from {current} to {requested}")
        self.current = current
        self.requested = requested


class StorageFault(ReviewDeskError):
    """Storage medium unavailable or transaction aborted."""

    pass


class ReconciliationFailure(ReviewDeskError):
    """Remote authority rejected the document or was unreachable."""

    pass


class ValidationError(ReviewDeskError):
    """Validation failed for input data."""

    pass
