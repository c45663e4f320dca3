"""Identifier generation for boxes and layouts."""

from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class IdGenerator:
    """Produces unique string identifiers on demand.

    Ids are random (uuid4) rather than counted, so a single generator can be
    shared between threads without locking.

    Attributes:
        prefix: Optional text prepended to every generated id
        length: Number of hex characters kept from the uuid
    """

    prefix: str = ""
    length: int = 12

    def next(self) -> str:
        """Return a fresh identifier."""
        return f"{self.prefix}{uuid.uuid4().hex[:self.length]}"


default_ids = IdGenerator()


def resolve_id(value: str | None, ids: IdGenerator | None = None) -> str:
    """Return ``value`` or a freshly generated id when it is None."""
    if value is not None:
        return value
    return (ids or default_ids).next()
