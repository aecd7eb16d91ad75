import logging
import uuid as uuidlib
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse

from people_api.core.exceptions import MalformedCanonicalURIError
from people_api.models.person import Person

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RedirectDecision:
    redirect: bool
    canonical_uuid: Optional[uuidlib.UUID] = None


def extract_canonical_uuid(id_uri: str) -> uuidlib.UUID:
    """UUID from the last path segment of a canonical id URI."""
    try:
        path = urlparse(id_uri or "").path
        return uuidlib.UUID(path.rstrip("/").split("/")[-1])
    except (ValueError, AttributeError) as exc:
        raise MalformedCanonicalURIError(f"Cannot extract a UUID from canonical id {id_uri!r}") from exc


def resolve_redirect(person: Person, requested: uuidlib.UUID) -> RedirectDecision:
    """Serve when the canonical id is the requested one, otherwise redirect to it.

    A canonical id that does not parse is logged and the document is served
    at the requested location.
    """
    try:
        canonical = extract_canonical_uuid(person.id)
    except MalformedCanonicalURIError as exc:
        logger.error("Error reading canonical ID: %s", exc)
        return RedirectDecision(redirect=False)
    if canonical == requested:
        return RedirectDecision(redirect=False, canonical_uuid=canonical)
    logger.debug("Redirecting %s to canonical %s", requested, canonical)
    return RedirectDecision(redirect=True, canonical_uuid=canonical)


def redirect_location(request_path: str, requested: str, canonical: uuidlib.UUID) -> str:
    return request_path.replace(requested, str(canonical), 1)
