"""Data-access ports consumed by the service layer.

Services depend only on these protocols; storage adapters implement them.
Lookups by identifier raise ``core.NotFoundError`` instead of returning None.
"""

from typing import Protocol, TypeVar

from models import DomainModel, Pos, Review, User

T = TypeVar("T", bound=DomainModel)
ID = TypeVar("ID")


class CrudDataService(Protocol[T, ID]):
    """Generic storage operations for an identity-bearing entity."""

    def get_all(self) -> list[T]: ...

    def get_by_id(self, id: ID) -> T:
        """Raises NotFoundError if no entity has this identifier."""
        ...

    def upsert(self, entity: T) -> T:
        """Assigns an identifier on first save; returns the stored value."""
        ...

    def delete(self, id: ID) -> None: ...

    def clear(self) -> None: ...


class UserDataService(CrudDataService[User, int], Protocol):
    def get_by_login_name(self, login_name: str) -> User: ...


class PosDataService(CrudDataService[Pos, int], Protocol):
    def get_by_name(self, name: str) -> Pos: ...


class ReviewDataService(CrudDataService[Review, int], Protocol):
    def filter_by_approval(self, pos: Pos, approved: bool) -> list[Review]:
        """Reviews of ``pos`` whose approved flag equals ``approved``."""
        ...

    def filter_by_author(self, pos: Pos, author: User) -> list[Review]:
        """Reviews of ``pos`` written by ``author``."""
        ...
