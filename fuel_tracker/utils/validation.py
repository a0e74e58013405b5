"""Verifications d'identifiants / Identifier checks."""

from fuel_tracker.exceptions import InvalidArgumentError


def require_id(value: int | None, entity_name: str) -> int:
    """Refuser un id absent / Reject a missing id before any log is read."""
    if value is None:
        raise InvalidArgumentError(f"{entity_name} ID cannot be null")
    return value
