import pytest
from neo4j.exceptions import ServiceUnavailable

from people_api.core.exceptions import DataAccessError, DataIntegrityError
from people_api.services.people import queries
from people_api.services.people.driver import PeopleCypherDriver

UUID = "70f4732b-7f7d-30a1-9c29-0cceec23760e"
CANONICAL = "dcd90ae4-52c2-4851-b5af-5c3d6ef527b6"


def _row(person_id, memberships=None):
    return {
        "person": {"id": person_id, "types": ["Thing", "Concept", "Person"], "prefLabel": "Someone", "labels": None},
        "memberships": memberships if memberships is not None else [
            {"membership": {"id": None, "types": None}, "organisation": {"id": None, "types": None}, "roles": []},
        ],
    }


class FakeResult:
    def __init__(self, rows):
        self._rows = rows

    def data(self):
        return self._rows


class FakeTx:
    def __init__(self, routes, calls):
        self.routes = routes
        self.calls = calls

    def run(self, query, **params):
        self.calls.append((query, params))
        return FakeResult(self.routes.get(query, []))


class FakeSession:
    def __init__(self, driver):
        self.driver = driver

    def __enter__(self):
        if self.driver.fail:
            raise self.driver.fail
        return self

    def __exit__(self, *exc):
        return False

    def execute_read(self, fn, *args):
        return fn(FakeTx(self.driver.routes, self.driver.calls), *args)


class FakeNeo4jDriver:
    def __init__(self, routes=None, fail=None):
        self.routes = routes or {}
        self.fail = fail
        self.calls = []
        self.sessions = []

    def session(self, **kwargs):
        self.sessions.append(kwargs)
        return FakeSession(self)


def test_canonical_path_used_first():
    fake = FakeNeo4jDriver({queries.READ_PERSON_CANONICAL: [_row(CANONICAL)]})
    person = PeopleCypherDriver(fake).read(UUID, "tid_test")

    assert person.id == "http://api.ft.com/things/" + CANONICAL
    assert person.memberships == []
    assert [q for q, _ in fake.calls] == [queries.READ_PERSON_CANONICAL]
    assert fake.calls[0][1] == {"uuid": UUID}


def test_falls_back_to_direct_path():
    fake = FakeNeo4jDriver({queries.READ_PERSON_DIRECT: [_row(UUID)]})
    person = PeopleCypherDriver(fake).read(UUID)

    assert person.id == "http://api.ft.com/things/" + UUID
    assert [q for q, _ in fake.calls] == [queries.READ_PERSON_CANONICAL, queries.READ_PERSON_DIRECT]


def test_not_found_returns_none():
    fake = FakeNeo4jDriver()
    assert PeopleCypherDriver(fake).read(UUID) is None


def test_multiple_canonical_people_is_integrity_error():
    fake = FakeNeo4jDriver({queries.READ_PERSON_CANONICAL: [_row(CANONICAL), _row(UUID)]})
    with pytest.raises(DataIntegrityError) as excinfo:
        PeopleCypherDriver(fake).read(UUID)
    assert UUID in excinfo.value.message


def test_store_failure_is_data_access_error():
    fake = FakeNeo4jDriver(fail=ServiceUnavailable("connection refused"))
    with pytest.raises(DataAccessError) as excinfo:
        PeopleCypherDriver(fake).read(UUID)
    assert "Error accessing datastore for uuid: " + UUID in excinfo.value.message


def test_unexpected_row_shape_is_data_access_error():
    fake = FakeNeo4jDriver({queries.READ_PERSON_CANONICAL: [{"memberships": []}]})
    with pytest.raises(DataAccessError):
        PeopleCypherDriver(fake).read(UUID)


def test_database_name_passed_to_session():
    fake = FakeNeo4jDriver({queries.READ_PERSON_CANONICAL: [_row(UUID)]})
    PeopleCypherDriver(fake, database="people").read(UUID)
    assert fake.sessions == [{"database": "people"}]


def test_check_connectivity():
    PeopleCypherDriver(FakeNeo4jDriver()).check_connectivity()
    with pytest.raises(DataAccessError):
        PeopleCypherDriver(FakeNeo4jDriver(fail=ServiceUnavailable("down"))).check_connectivity()


def test_queries_order_organisations_descending():
    for statement in (queries.READ_PERSON_CANONICAL, queries.READ_PERSON_DIRECT):
        assert "$uuid" in statement
        assert "ORDER BY org_id DESC" in statement
        assert "UPPIdentifier" in statement
    assert "EQUIVALENT_TO" in queries.READ_PERSON_CANONICAL
    assert "EQUIVALENT_TO" not in queries.READ_PERSON_DIRECT


def test_canonical_person_id_falls_back_to_uuid():
    assert "coalesce(canonical.prefUUID, canonical.uuid) AS person_id" in queries.READ_PERSON_CANONICAL
