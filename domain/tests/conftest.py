"""Pytest configuration and shared fixtures.

This module provides:
- Approval configuration with a known threshold
- Mocked data-access ports for unit tests
- In-memory adapters and services for integration tests
"""

import logging
from unittest.mock import MagicMock

import pytest
import structlog

from core.config import ApprovalConfiguration, clear_settings_cache
from repositories import (
    InMemoryPosDataService,
    InMemoryReviewDataService,
    InMemoryUserDataService,
    PosDataService,
    ReviewDataService,
    UserDataService,
)
from services import ReviewService

# Threshold used throughout the tests
MIN_APPROVAL_COUNT = 3


@pytest.fixture(autouse=True)
def _clear_settings():
    """Settings are lru_cached; never leak them between tests."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture(autouse=True)
def _restore_logging():
    """Save and restore root logger and structlog state around each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    structlog.reset_defaults()


@pytest.fixture
def approval_configuration() -> ApprovalConfiguration:
    return ApprovalConfiguration(min_count=MIN_APPROVAL_COUNT)


# =============================================================================
# Mocked ports (unit tests)
# =============================================================================


@pytest.fixture
def review_data_service() -> MagicMock:
    return MagicMock(spec=ReviewDataService)


@pytest.fixture
def user_data_service() -> MagicMock:
    return MagicMock(spec=UserDataService)


@pytest.fixture
def pos_data_service() -> MagicMock:
    return MagicMock(spec=PosDataService)


@pytest.fixture
def review_service(
    review_data_service, user_data_service, pos_data_service, approval_configuration
) -> ReviewService:
    return ReviewService(
        review_data_service,
        user_data_service,
        pos_data_service,
        approval_configuration,
    )


# =============================================================================
# In-memory adapters (integration tests)
# =============================================================================


@pytest.fixture
def memory_pos() -> InMemoryPosDataService:
    return InMemoryPosDataService()


@pytest.fixture
def memory_users() -> InMemoryUserDataService:
    return InMemoryUserDataService()


@pytest.fixture
def memory_reviews() -> InMemoryReviewDataService:
    return InMemoryReviewDataService()


@pytest.fixture
def memory_review_service(
    memory_reviews, memory_users, memory_pos, approval_configuration
) -> ReviewService:
    return ReviewService(
        memory_reviews, memory_users, memory_pos, approval_configuration
    )
