"""In-memory implementations of the data-access ports.

Used by integration tests and local wiring. Not thread-safe: concurrent
read-modify-write sequences (e.g. two approvals of one review) can lose
updates, same as any storage without transactions.
"""

from datetime import UTC, datetime
from itertools import count
from typing import Generic, TypeVar

from core import get_logger
from core.exceptions import NotFoundError
from models import DomainModel, Pos, Review, User

logger = get_logger(__name__)

T = TypeVar("T", bound=DomainModel)


class InMemoryDataService(Generic[T]):
    """Dict-backed storage keyed by integer identifiers."""

    def __init__(self, entity_type: type[T]):
        self.entity_type = entity_type
        self._entities: dict[int, T] = {}
        self._ids = count(1)

    def get_all(self) -> list[T]:
        return [self._entities[id] for id in sorted(self._entities)]

    def get_by_id(self, id: int) -> T:
        try:
            return self._entities[id]
        except KeyError:
            raise NotFoundError(self.entity_type, id) from None

    def upsert(self, entity: T) -> T:
        """Insert (assigning an ID) or replace an entity.

        Replacing requires the identifier to exist; storage never
        accepts caller-invented identifiers.
        """
        now = datetime.now(UTC)
        if entity.id is None:
            stored = entity.model_copy(
                update={"id": next(self._ids), "created_at": now, "updated_at": now}
            )
        else:
            existing = self.get_by_id(entity.id)
            stored = entity.model_copy(
                update={"created_at": existing.created_at, "updated_at": now}
            )
        self._entities[stored.id] = stored
        logger.debug(
            "storage.upserted", entity_type=self.entity_type.__name__, id=stored.id
        )
        return stored

    def delete(self, id: int) -> None:
        if id not in self._entities:
            raise NotFoundError(self.entity_type, id)
        del self._entities[id]

    def clear(self) -> None:
        self._entities.clear()
        self._ids = count(1)


class InMemoryUserDataService(InMemoryDataService[User]):
    def __init__(self):
        super().__init__(User)

    def get_by_login_name(self, login_name: str) -> User:
        for user in self._entities.values():
            if user.login_name == login_name:
                return user
        raise NotFoundError(User, login_name)


class InMemoryPosDataService(InMemoryDataService[Pos]):
    def __init__(self):
        super().__init__(Pos)

    def get_by_name(self, name: str) -> Pos:
        for pos in self._entities.values():
            if pos.name == name:
                return pos
        raise NotFoundError(Pos, name)


class InMemoryReviewDataService(InMemoryDataService[Review]):
    def __init__(self):
        super().__init__(Review)

    def filter_by_approval(self, pos: Pos, approved: bool) -> list[Review]:
        return [
            review
            for review in self.get_all()
            if review.pos.id == pos.id and review.approved is approved
        ]

    def filter_by_author(self, pos: Pos, author: User) -> list[Review]:
        return [
            review
            for review in self.get_all()
            if review.pos.id == pos.id and review.author.id == author.id
        ]
