"""User service."""

from models import User
from repositories.ports import UserDataService
from services.crud_service import CrudService


class UserService(CrudService[User, int]):
    def __init__(self, user_data_service: UserDataService):
        super().__init__(User)
        self._user_data_service = user_data_service

    @property
    def data_service(self) -> UserDataService:
        return self._user_data_service

    def get_by_login_name(self, login_name: str) -> User:
        return self._user_data_service.get_by_login_name(login_name)
