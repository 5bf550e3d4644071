"""Wire services to their data-access adapters.

Usage:
    from bootstrap import build_in_memory_services
    services = build_in_memory_services()
    services.reviews.approve(review, user_id=2)
"""

from dataclasses import dataclass

import structlog

from core import configure_logging, get_logger
from core.config import ApprovalConfiguration, get_settings
from repositories.memory import (
    InMemoryPosDataService,
    InMemoryReviewDataService,
    InMemoryUserDataService,
)
from repositories.ports import PosDataService, ReviewDataService, UserDataService
from services import PosService, ReviewService, UserService

logger = get_logger(__name__)


@dataclass(frozen=True)
class Services:
    """The service objects a transport layer calls into."""

    pos: PosService
    users: UserService
    reviews: ReviewService


def build_services(
    pos_data_service: PosDataService,
    user_data_service: UserDataService,
    review_data_service: ReviewDataService,
    approval_configuration: ApprovalConfiguration | None = None,
) -> Services:
    """Build services over the given ports.

    The approval configuration defaults to the one in the cached settings,
    so it is read once per process. Logging is configured on the first call.
    """
    if not structlog.is_configured():
        configure_logging()

    if approval_configuration is None:
        approval_configuration = get_settings().approval_configuration

    logger.info("services.built", approval_min_count=approval_configuration.min_count)
    return Services(
        pos=PosService(pos_data_service),
        users=UserService(user_data_service),
        reviews=ReviewService(
            review_data_service,
            user_data_service,
            pos_data_service,
            approval_configuration,
        ),
    )


def build_in_memory_services(
    approval_configuration: ApprovalConfiguration | None = None,
) -> Services:
    return build_services(
        InMemoryPosDataService(),
        InMemoryUserDataService(),
        InMemoryReviewDataService(),
        approval_configuration,
    )
