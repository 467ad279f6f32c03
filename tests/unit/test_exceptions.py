"""Unit tests for domain exceptions."""

import pytest

from reviewdesk.domain.exceptions import (
    InvalidTransition,
    NotFound,
    ReconciliationFailure,
    ReviewDeskError,
    StorageFault,
    ValidationError,
)


@pytest.mark.parametrize(
    "exc_type",
    [NotFound, InvalidTransition, StorageFault, ReconciliationFailure, ValidationError],
)
def test_exceptions_inherit_reviewdesk_error(exc_type: type) -> None:
    """Every domain exception is a ReviewDeskError."""
    assert issubclass(exc_type, ReviewDeskError)


def test_invalid_transition_names_both_states() -> None:
    """InvalidTransition message and attributes carry both states."""
    err = InvalidTransition("in_review", "accepted")
    assert err.current == "in_review"
    assert err.requested == "accepted"
    assert "in_review" in str(err)
    assert "accepted" in str(err)


def test_raise_not_found_catchable_as_reviewdesk_error() -> None:
    """NotFound can be caught as ReviewDeskError."""
    with pytest.raises(ReviewDeskError, match="missing"):
        raise NotFound("Document missing")
