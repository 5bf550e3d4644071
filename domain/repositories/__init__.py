"""Data-access layer.

Services talk to storage only through the protocols in ``ports``; any
object with matching methods can be injected. ``memory`` holds the
dict-backed adapters used by tests and local wiring.
"""

from repositories.memory import (
    InMemoryDataService,
    InMemoryPosDataService,
    InMemoryReviewDataService,
    InMemoryUserDataService,
)
from repositories.ports import (
    CrudDataService,
    PosDataService,
    ReviewDataService,
    UserDataService,
)

__all__ = [
    "CrudDataService",
    "InMemoryDataService",
    "InMemoryPosDataService",
    "InMemoryReviewDataService",
    "InMemoryUserDataService",
    "PosDataService",
    "ReviewDataService",
    "UserDataService",
]
