"""POS service."""

from models import Pos
from repositories.ports import PosDataService
from services.crud_service import CrudService


class PosService(CrudService[Pos, int]):
    def __init__(self, pos_data_service: PosDataService):
        super().__init__(Pos)
        self._pos_data_service = pos_data_service

    @property
    def data_service(self) -> PosDataService:
        return self._pos_data_service

    def get_by_name(self, name: str) -> Pos:
        """Look up a POS by its exact name. Raises NotFoundError if absent."""
        return self._pos_data_service.get_by_name(name)
