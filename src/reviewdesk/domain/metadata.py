"""Document metadata rules."""

MIN_TITLE_LENGTH = 3


def metadata_errors(title: object, authors: object) -> list[str]:
    """Problems with a title and author list; empty when both are acceptable."""
    errors = []
    if not isinstance(title, str) or len(title.strip()) < MIN_TITLE_LENGTH:
        errors.append(f"Title must have at least {MIN_TITLE_LENGTH} characters")
    if (
        not isinstance(authors, list)
        or not authors
        or not all(isinstance(a, str) and a.strip() for a in authors)
    ):
        errors.append("At least one author is required")
    return errors
