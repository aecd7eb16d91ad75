"""Error hierarchy for the people read path."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class PeopleApiError(Exception):
    """Base class for errors raised below the HTTP layer."""

    message: str
    details: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} :: {self.details}"
        return self.message


class DataAccessError(PeopleApiError):
    """The graph store could not execute the query (unreachable, bad statement)."""


class DataIntegrityError(PeopleApiError):
    """More than one canonical person resolved for a single UUID."""


class MalformedCanonicalURIError(PeopleApiError):
    """A canonical id URI has no UUID as its last path segment."""
