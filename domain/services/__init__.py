"""Service layer: business rules on top of the data-access ports."""

from services.crud_service import CrudService
from services.pos_service import PosService
from services.review_service import ReviewService
from services.user_service import UserService

__all__ = [
    "CrudService",
    "PosService",
    "ReviewService",
    "UserService",
]
