from people_api.services.people.types import api_url, id_url, most_specific_type, type_uris

UUID = "70f4732b-7f7d-30a1-9c29-0cceec23760e"


def test_id_url_is_things_prefix():
    assert id_url(UUID) == "http://api.ft.com/things/" + UUID


def test_api_url_by_label():
    assert api_url(UUID, ["Thing", "Concept", "Person"]) == "http://api.ft.com/people/" + UUID
    assert api_url(UUID, ["PublicCompany"]) == "http://api.ft.com/organisations/" + UUID
    assert api_url(UUID, ["Organisation", "Company"]) == "http://api.ft.com/organisations/" + UUID
    assert api_url(UUID, ["Role"]) == "http://api.ft.com/things/" + UUID
    assert api_url(UUID, []) == "http://api.ft.com/things/" + UUID


def test_api_url_person_wins_regardless_of_label_order():
    assert api_url(UUID, ["Company", "Person"]) == "http://api.ft.com/people/" + UUID


def test_type_uris_general_first_and_unknown_dropped():
    uris = type_uris(["PrivateCompany", "Banana", "Organisation", "Company", "Thing"])
    assert uris == [
        "http://www.ft.com/ontology/core/Thing",
        "http://www.ft.com/ontology/organisation/Organisation",
        "http://www.ft.com/ontology/company/Company",
        "http://www.ft.com/ontology/company/PrivateCompany",
    ]


def test_type_uris_dedupes():
    assert type_uris(["Person", "Person"]) == ["http://www.ft.com/ontology/person/Person"]


def test_most_specific_type():
    assert most_specific_type(["Thing", "Concept", "Person"]) == "http://www.ft.com/ontology/person/Person"
    assert most_specific_type(["Organisation", "Company", "PublicCompany"]) == (
        "http://www.ft.com/ontology/company/PublicCompany"
    )
    assert most_specific_type(["Role", "BoardRole"]) == "http://www.ft.com/ontology/organisation/BoardRole"


def test_unrecognised_labels():
    assert type_uris(["Banana", "Apple"]) == []
    assert most_specific_type(["Banana", "Apple"]) is None
    assert most_specific_type([]) is None
