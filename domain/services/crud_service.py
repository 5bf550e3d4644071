"""Generic CRUD service shared by all entity services."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from core import get_logger
from models import DomainModel
from repositories.ports import CrudDataService

logger = get_logger(__name__)

T = TypeVar("T", bound=DomainModel)
ID = TypeVar("ID")


class CrudService(ABC, Generic[T, ID]):
    """Uniform CRUD facade over a data-access port.

    Subclasses supply the port via ``data_service``. The only logic here is
    the insert-vs-update dispatch in ``upsert``; everything else delegates.
    """

    def __init__(self, entity_type: type[T]):
        self.entity_type = entity_type

    @property
    @abstractmethod
    def data_service(self) -> CrudDataService[T, ID]: ...

    def clear(self) -> None:
        logger.info("entity.cleared", entity_type=self.entity_type.__name__)
        self.data_service.clear()

    def get_all(self) -> list[T]:
        return self.data_service.get_all()

    def get_by_id(self, id: ID) -> T:
        """Raises NotFoundError if the entity does not exist."""
        return self.data_service.get_by_id(id)

    def upsert(self, entity: T) -> T:
        """Create an entity without an ID, or update an existing one.

        Updates confirm existence first so a stale or invented identifier
        fails with NotFoundError instead of being persisted. Creates skip
        the lookup.
        """
        entity_name = self.entity_type.__name__
        if entity.id is None:
            created = self.data_service.upsert(entity)
            logger.info("entity.created", entity_type=entity_name, id=created.id)
            return created

        self.get_by_id(entity.id)
        updated = self.data_service.upsert(entity)
        logger.info("entity.updated", entity_type=entity_name, id=entity.id)
        return updated

    def delete(self, id: ID) -> None:
        # Absence handling belongs to the data service
        logger.info("entity.deleted", entity_type=self.entity_type.__name__, id=id)
        self.data_service.delete(id)
