"""Typed shapes of the rows returned by the person read query.

Each model mirrors one map built in the query's WITH/RETURN projection
(see services/people/queries.py). Rows are validated into these models once,
inside the executor, so the assembler never handles raw dicts.
"""
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator


def _as_text(value: Any) -> Optional[str]:
    # Temporal values may come back as neo4j.time types rather than strings.
    if value is None:
        return None
    if isinstance(value, str):
        return value
    to_native = getattr(value, "to_native", None)
    if callable(to_native):
        value = to_native()
    iso = getattr(value, "isoformat", None)
    if callable(iso):
        return iso()
    return str(value)


class _NeoNode(BaseModel):
    id: Optional[str] = None
    types: List[str] = Field(default_factory=list)
    pref_label: Optional[str] = Field(None, alias="prefLabel")

    @field_validator("types", mode="before")
    @classmethod
    def _null_types(cls, v):
        return v or []

    class Config:
        populate_by_name = True
        frozen = True


class NeoOrganisation(_NeoNode):
    labels: List[str] = Field(default_factory=list)

    @field_validator("labels", mode="before")
    @classmethod
    def _null_labels(cls, v):
        return v or []


class NeoRole(_NeoNode):
    inception_date: Optional[str] = Field(None, alias="inceptionDate")
    termination_date: Optional[str] = Field(None, alias="terminationDate")

    @field_validator("inception_date", "termination_date", mode="before")
    @classmethod
    def _dates(cls, v):
        return _as_text(v)


class NeoMembership(NeoRole):
    title: Optional[str] = None


class NeoMembershipGroup(BaseModel):
    """One membership with its organisation and the roles collected for it."""

    membership: NeoMembership = Field(default_factory=NeoMembership)
    organisation: NeoOrganisation = Field(default_factory=NeoOrganisation)
    roles: List[NeoRole] = Field(default_factory=list)

    @field_validator("membership", "organisation", mode="before")
    @classmethod
    def _null_node(cls, v):
        return v or {}

    @field_validator("roles", mode="before")
    @classmethod
    def _null_roles(cls, v):
        return [r for r in (v or []) if r is not None]

    class Config:
        frozen = True


class NeoPerson(NeoOrganisation):
    birth_year: Optional[int] = Field(None, alias="birthYear")
    salutation: Optional[str] = None
    email_address: Optional[str] = Field(None, alias="emailAddress")
    twitter_handle: Optional[str] = Field(None, alias="twitterHandle")
    facebook_profile: Optional[str] = Field(None, alias="facebookProfile")
    linkedin_profile: Optional[str] = Field(None, alias="linkedinProfile")
    image_url: Optional[str] = Field(None, alias="imageUrl")
    description: Optional[str] = None
    description_xml: Optional[str] = Field(None, alias="descriptionXML")


class NeoPersonRecord(BaseModel):
    person: NeoPerson
    memberships: List[NeoMembershipGroup] = Field(default_factory=list)

    @field_validator("memberships", mode="before")
    @classmethod
    def _null_memberships(cls, v):
        return [m for m in (v or []) if m is not None]

    class Config:
        frozen = True
