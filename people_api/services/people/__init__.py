"""Person read path: query executor, assembler, type mapping and redirects.

Everything callers need is importable from the package.
"""
from .assembler import is_complete_membership, to_person
from .change_events import change_events, format_timestamp
from .driver import PeopleCypherDriver
from .redirect import RedirectDecision, extract_canonical_uuid, redirect_location, resolve_redirect
from .types import api_url, id_url, most_specific_type, type_uris

__all__ = [
    # executor
    'PeopleCypherDriver',
    # assembly
    'to_person', 'is_complete_membership',
    # change events
    'change_events', 'format_timestamp',
    # redirects
    'RedirectDecision', 'extract_canonical_uuid', 'redirect_location', 'resolve_redirect',
    # type mapping
    'id_url', 'api_url', 'type_uris', 'most_specific_type',
]
