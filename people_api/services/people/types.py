"""Mapping from graph node labels to public URIs and ontology types."""
from typing import Iterable, List, Optional

THINGS_BASE = "http://api.ft.com/things/"
API_BASE = "http://api.ft.com/"
ONTOLOGY_BASE = "http://www.ft.com/ontology/"

ORGANISATION_LABELS = ("Organisation", "Company", "PublicCompany", "PrivateCompany")

# Ordered general -> specific. Depth is the specificity used for directType;
# labels of equal depth keep this order as a tie-break.
_ONTOLOGY = (
    ("Thing", 0, "core/Thing"),
    ("Concept", 1, "concept/Concept"),
    ("Person", 2, "person/Person"),
    ("Organisation", 2, "organisation/Organisation"),
    ("Membership", 2, "organisation/Membership"),
    ("Role", 2, "organisation/Role"),
    ("Company", 3, "company/Company"),
    ("BoardRole", 3, "organisation/BoardRole"),
    ("PublicCompany", 4, "company/PublicCompany"),
    ("PrivateCompany", 4, "company/PrivateCompany"),
)


def id_url(internal_id: str) -> str:
    return THINGS_BASE + internal_id


def api_url(internal_id: str, labels: Iterable[str]) -> str:
    """Public API location for a node.

    Graph labels carry no order, so the check runs in a fixed priority:
    Person first, then any organisation label, else the generic things path.
    """
    present = set(labels or ())
    if "Person" in present:
        return API_BASE + "people/" + internal_id
    if any(label in present for label in ORGANISATION_LABELS):
        return API_BASE + "organisations/" + internal_id
    return API_BASE + "things/" + internal_id


def type_uris(labels: Iterable[str]) -> List[str]:
    """Ontology URIs for the recognised labels, general first. Unknown labels are dropped."""
    present = set(labels or ())
    return [ONTOLOGY_BASE + path for label, _, path in _ONTOLOGY if label in present]


def most_specific_type(labels: Iterable[str]) -> Optional[str]:
    """The single deepest recognised type, or None when no label is recognised."""
    present = set(labels or ())
    best = None
    best_depth = -1
    for label, depth, path in _ONTOLOGY:
        if label in present and depth > best_depth:
            best, best_depth = ONTOLOGY_BASE + path, depth
    return best
