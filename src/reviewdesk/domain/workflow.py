"""Review status workflow - legal transitions and display metadata.

Pure functions, no I/O. Callers must run :func:`apply_transition` before
asking the record store to change a status; the store does not re-check.
"""

from dataclasses import dataclass

from reviewdesk.domain.exceptions import InvalidTransition
from reviewdesk.domain.value_objects import ReviewStatus

INITIAL_STATUS = ReviewStatus.PENDING

TRANSITIONS: dict[ReviewStatus, frozenset[ReviewStatus]] = {
    ReviewStatus.PENDING: frozenset({ReviewStatus.IN_REVIEW, ReviewStatus.REJECTED}),
    ReviewStatus.IN_REVIEW: frozenset(
        {ReviewStatus.REVIEW_COMPLETE, ReviewStatus.REJECTED}
    ),
    ReviewStatus.REVIEW_COMPLETE: frozenset(
        {ReviewStatus.ACCEPTED, ReviewStatus.REJECTED, ReviewStatus.IN_REVIEW}
    ),
    ReviewStatus.ACCEPTED: frozenset(),
    # Resubmission
    ReviewStatus.REJECTED: frozenset({ReviewStatus.PENDING}),
}


@dataclass(frozen=True)
class StatusDisplay:
    """Label and colors used to render a status."""

    label: str
    color: str
    background: str


_DISPLAY: dict[ReviewStatus, StatusDisplay] = {
    ReviewStatus.PENDING: StatusDisplay("Pending", "#f59e0b", "#fffbeb"),
    ReviewStatus.IN_REVIEW: StatusDisplay("In Review", "#3b82f6", "#eff6ff"),
    ReviewStatus.REVIEW_COMPLETE: StatusDisplay("Review Complete", "#8b5cf6", "#f5f3ff"),
    ReviewStatus.ACCEPTED: StatusDisplay("Accepted", "#10b981", "#f0fdf4"),
    ReviewStatus.REJECTED: StatusDisplay("Rejected", "#ef4444", "#fef2f2"),
}

_NEUTRAL_COLOR = "#6b7280"
_NEUTRAL_BACKGROUND = "#f3f4f6"


def _parse(status: str) -> ReviewStatus | None:
    try:
        return ReviewStatus(status)
    except ValueError:
        return None


def valid_transitions(current: str) -> frozenset[ReviewStatus]:
    """Allowed destinations from ``current``; empty for unknown statuses."""
    parsed = _parse(current)
    if parsed is None:
        return frozenset()
    return TRANSITIONS[parsed]


def is_terminal(status: str) -> bool:
    parsed = _parse(status)
    return parsed is not None and not TRANSITIONS[parsed]


def apply_transition(current: str, requested: str) -> ReviewStatus:
    """Return the requested status if the move is legal.

    Raises:
        InvalidTransition: ``requested`` is not reachable from ``current``.
    """
    target = _parse(requested)
    if target is None or target not in valid_transitions(current):
        raise InvalidTransition(str(current), str(requested))
    return target


def display_info(status: str) -> StatusDisplay:
    """Presentation metadata; neutral fallback for unknown statuses."""
    parsed = _parse(status)
    if parsed is None:
        return StatusDisplay(str(status), _NEUTRAL_COLOR, _NEUTRAL_BACKGROUND)
    return _DISPLAY[parsed]
