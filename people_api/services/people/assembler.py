"""Builds the public Person document from a decoded query record."""
import logging
from typing import List, Optional

from people_api.models.neo_records import NeoMembershipGroup, NeoPersonRecord, NeoRole
from people_api.models.person import Membership, Organisation, Person, Role
from people_api.services.people.change_events import change_events
from people_api.services.people.types import api_url, id_url, most_specific_type, type_uris

logger = logging.getLogger(__name__)


def valid_roles(group: NeoMembershipGroup) -> List[NeoRole]:
    return [r for r in group.roles if r.id]


def is_complete_membership(group: NeoMembershipGroup) -> bool:
    """A membership is published only with its own id, an organisation id and at least one role.

    OPTIONAL MATCH leaves dangling fragments (no organisation, no roles, or no
    membership at all for a person without any); those are dropped silently
    rather than published as partial data.
    """
    return bool(group.membership.id) and bool(group.organisation.id) and bool(valid_roles(group))


def _events_or_none(started_at, ended_at):
    return change_events(started_at, ended_at) or None


def _to_organisation(group: NeoMembershipGroup) -> Organisation:
    neo = group.organisation
    return Organisation(
        id=id_url(neo.id),
        api_url=api_url(neo.id, neo.types),
        types=type_uris(neo.types),
        direct_type=most_specific_type(neo.types),
        pref_label=neo.pref_label,
        labels=list(neo.labels) or None,
    )


def _to_role(neo: NeoRole) -> Role:
    return Role(
        id=id_url(neo.id),
        api_url=api_url(neo.id, neo.types),
        types=type_uris(neo.types),
        direct_type=most_specific_type(neo.types),
        pref_label=neo.pref_label,
        change_events=_events_or_none(neo.inception_date, neo.termination_date),
    )


def _to_membership(group: NeoMembershipGroup) -> Membership:
    neo = group.membership
    return Membership(
        title=neo.title or neo.pref_label,
        types=type_uris(neo.types),
        direct_type=most_specific_type(neo.types),
        organisation=_to_organisation(group),
        change_events=_events_or_none(neo.inception_date, neo.termination_date),
        roles=[_to_role(r) for r in valid_roles(group)],
    )


def to_person(record: NeoPersonRecord) -> Optional[Person]:
    """Assemble a Person; None if the record carries no person id.

    Membership order is the order the query produced.
    """
    neo = record.person
    if not neo.id:
        return None

    memberships = [_to_membership(g) for g in record.memberships if is_complete_membership(g)]
    dropped = len(record.memberships) - len(memberships)
    if dropped:
        logger.debug("Dropped %d incomplete membership(s) for person %s", dropped, neo.id)

    return Person(
        id=id_url(neo.id),
        api_url=api_url(neo.id, neo.types),
        types=type_uris(neo.types),
        direct_type=most_specific_type(neo.types),
        pref_label=neo.pref_label,
        labels=list(neo.labels) or None,
        birth_year=neo.birth_year,
        salutation=neo.salutation,
        email_address=neo.email_address,
        twitter_handle=neo.twitter_handle,
        facebook_profile=neo.facebook_profile,
        linkedin_profile=neo.linkedin_profile,
        image_url=neo.image_url,
        description=neo.description,
        description_xml=neo.description_xml,
        memberships=memberships,
    )
