"""Domain models for POS reviews.

Models are immutable pydantic objects. State changes produce copies
(``model_copy(update=...)``) which are then persisted through a
data-access port; identifiers and timestamps are owned by storage.
"""

from datetime import datetime
from enum import Enum
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PosType(str, Enum):
    """Kind of point of sale."""

    CAFE = "CAFE"
    VENDING_MACHINE = "VENDING_MACHINE"
    BAKERY = "BAKERY"
    CAFETERIA = "CAFETERIA"


class CampusType(str, Enum):
    """Campus a point of sale belongs to."""

    ALTSTADT = "ALTSTADT"
    BERGHEIM = "BERGHEIM"
    INF = "INF"


class DomainModel(BaseModel):
    """Base for every entity managed through a CRUD service.

    ``id`` is None until the entity is first persisted.
    """

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def with_id(self, id: int | None) -> Self:
        """Return a copy carrying the given identifier."""
        return self.model_copy(update={"id": id})


class User(DomainModel):
    """A registered user; reviews reference users as authors and approvers."""

    login_name: str
    email_address: str | None = None
    first_name: str | None = None
    last_name: str | None = None

    @field_validator("login_name")
    @classmethod
    def validate_login_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("login_name must not be blank")
        return v


class Pos(DomainModel):
    """A point of sale (location) that can be reviewed."""

    name: str
    description: str = ""
    type: PosType = PosType.CAFE
    campus: CampusType = CampusType.ALTSTADT
    street: str | None = None
    house_number: str | None = None
    postal_code: int | None = None
    city: str | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v


class Review(DomainModel):
    """A user's review of a POS.

    ``approved`` is kept equal to ``approval_count >= min_count`` by
    ``ReviewService``; the model itself does not know the threshold.
    """

    pos: Pos
    author: User
    content: str = ""
    approval_count: int = Field(default=0, ge=0)
    approved: bool = False
