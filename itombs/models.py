"""Data models for relative records."""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class Relationship(str, Enum):
    """Relationship of a relative to the tree's subject."""
    SELF = "self"
    PARENT = "parent"
    CHILD = "child"
    SIBLING = "sibling"
    SPOUSE = "spouse"
    GRANDPARENT = "grandparent"
    GRANDCHILD = "grandchild"
    AUNT = "aunt"
    UNCLE = "uncle"
    COUSIN = "cousin"
    NEPHEW = "nephew"
    NIECE = "niece"


RELATIONSHIP_CHOICES = [r.value for r in Relationship]


class RelativeRecord(BaseModel):
    """One named relative in a user's family tree.

    ``relationship`` is kept as the stored string so that legacy rows outside
    the vocabulary still load (and can be deleted).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(alias="tree_id")
    owner_id: int = Field(alias="user_id")
    name: str = Field(alias="relative_name")
    relationship: str
    profile_link: Optional[str] = Field(default=None, alias="profile_url")

    @property
    def is_self(self) -> bool:
        return self.relationship.lower() == Relationship.SELF.value

    def to_api(self) -> dict:
        """Serialize with the column names used on the wire."""
        return self.model_dump(by_alias=True)


class NewRelative(BaseModel):
    """Request body for adding a relative."""

    model_config = ConfigDict(populate_by_name=True)

    owner_id: Optional[int] = Field(default=None, alias="userId")
    name: Optional[str] = Field(default=None, alias="relativeName")
    relationship: Optional[str] = None
    profile_link: Optional[str] = Field(default=None, alias="profileUrl")
