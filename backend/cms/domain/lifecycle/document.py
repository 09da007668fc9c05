from typing import Set

from cms.domain.exceptions import IllegalTransition

DRAFT = "DRAFT"
PUBLISHED = "PUBLISHED"

STATUSES = (DRAFT, PUBLISHED)

# Explicit allowed state transitions. Saving a draft never changes status.
ALLOWED_TRANSITIONS: dict[str, Set[str]] = {
    DRAFT: {PUBLISHED},
    PUBLISHED: {PUBLISHED, DRAFT},  # republish | unpublish
}

def assert_transition(*, from_status: str, to_status: str) -> None:
    """
    Guards document lifecycle transitions.
    Single source of truth for status changes of pages and collection items.
    """
    allowed = ALLOWED_TRANSITIONS.get(from_status, set())

    if to_status not in allowed:
        raise IllegalTransition(
            f"Illegal transition: {from_status} -> {to_status}"
        )
