"""Identifier validation shared by services."""

import uuid

from app.core.exceptions import BadRequestError


def parse_id(value: str, entity: str) -> str:
    """Return the canonical UUID string or raise 400 ``Invalid <entity> id``."""
    try:
        return str(uuid.UUID(str(value)))
    except ValueError:
        raise BadRequestError(f"Invalid {entity.lower()} id")


def canonical_id(value: str) -> str:
    """Canonical UUID string when ``value`` parses as one, else ``value`` unchanged."""
    try:
        return str(uuid.UUID(value))
    except ValueError:
        return value
