from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class ChangeEvent(BaseModel):
    """One bound of a membership's or role's validity; exactly one field is set."""

    started_at: Optional[str] = Field(None, alias="startedAt")
    ended_at: Optional[str] = Field(None, alias="endedAt")

    class Config:
        populate_by_name = True
        frozen = True


class Thing(BaseModel):
    id: str
    api_url: str = Field(alias="apiUrl")
    types: List[str] = Field(default_factory=list)
    direct_type: Optional[str] = Field(None, alias="directType")
    pref_label: Optional[str] = Field(None, alias="prefLabel")

    class Config:
        populate_by_name = True
        frozen = True


class Organisation(Thing):
    labels: Optional[List[str]] = None


class Role(Thing):
    change_events: Optional[List[ChangeEvent]] = Field(None, alias="changeEvents")


class Membership(BaseModel):
    title: Optional[str] = None
    types: List[str] = Field(default_factory=list)
    direct_type: Optional[str] = Field(None, alias="directType")
    organisation: Organisation
    change_events: Optional[List[ChangeEvent]] = Field(None, alias="changeEvents")
    roles: List[Role]

    class Config:
        populate_by_name = True
        frozen = True


class Person(Thing):
    """Public Person document returned by GET /people/{uuid}.

    Optional fields are left as None and dropped on serialisation, so an absent
    value never shows up as null. `memberships` is always present.
    """

    labels: Optional[List[str]] = None
    birth_year: Optional[int] = Field(None, alias="birthYear")
    salutation: Optional[str] = None
    email_address: Optional[str] = Field(None, alias="emailAddress")
    twitter_handle: Optional[str] = Field(None, alias="twitterHandle")
    facebook_profile: Optional[str] = Field(None, alias="facebookProfile")
    linkedin_profile: Optional[str] = Field(None, alias="linkedinProfile")
    image_url: Optional[str] = Field(None, alias="imageUrl")
    description: Optional[str] = None
    description_xml: Optional[str] = Field(None, alias="descriptionXML")
    memberships: List[Membership] = Field(default_factory=list)

    def to_public(self) -> Dict[str, Any]:
        """JSON-ready dict using the public camelCase field names."""
        return self.model_dump(by_alias=True, exclude_none=True)
