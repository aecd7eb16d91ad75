import logging
import uuid

import pytest

from people_api.core.exceptions import MalformedCanonicalURIError
from people_api.models.person import Person
from people_api.services.people.redirect import (
    extract_canonical_uuid,
    redirect_location,
    resolve_redirect,
)

REQUESTED = uuid.UUID("70f4732b-7f7d-30a1-9c29-0cceec23760e")
CANONICAL = uuid.UUID("dcd90ae4-52c2-4851-b5af-5c3d6ef527b6")


def _person(person_id: str) -> Person:
    return Person(id=person_id, api_url="http://api.ft.com/people/x", pref_label="Someone")


def test_extract_canonical_uuid():
    assert extract_canonical_uuid("http://api.ft.com/things/" + str(CANONICAL)) == CANONICAL


def test_extract_canonical_uuid_malformed():
    with pytest.raises(MalformedCanonicalURIError):
        extract_canonical_uuid("http://api.ft.com/things/not-a-uuid")
    with pytest.raises(MalformedCanonicalURIError):
        extract_canonical_uuid("")


def test_same_uuid_is_served():
    decision = resolve_redirect(_person("http://api.ft.com/things/" + str(REQUESTED)), REQUESTED)
    assert decision.redirect is False
    assert decision.canonical_uuid == REQUESTED


def test_alias_is_redirected():
    decision = resolve_redirect(_person("http://api.ft.com/things/" + str(CANONICAL)), REQUESTED)
    assert decision.redirect is True
    assert decision.canonical_uuid == CANONICAL


def test_malformed_canonical_is_logged_and_served(caplog):
    with caplog.at_level(logging.ERROR):
        decision = resolve_redirect(_person("http://api.ft.com/things/garbage"), REQUESTED)
    assert decision.redirect is False
    assert "Error reading canonical ID" in caplog.text


def test_redirect_location_replaces_first_occurrence():
    path = "/people/" + str(REQUESTED)
    assert redirect_location(path, str(REQUESTED), CANONICAL) == "/people/" + str(CANONICAL)
