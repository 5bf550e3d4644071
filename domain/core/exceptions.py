"""Domain exceptions shared by services and data-access adapters."""

from typing import Any


class DomainError(Exception):
    """Base exception for all service-layer errors."""

    pass


class NotFoundError(DomainError):
    """Raised when a lookup by identifier (or unique key) finds nothing."""

    def __init__(self, entity_type: type | str, id: Any):
        self.entity_type = (
            entity_type if isinstance(entity_type, str) else entity_type.__name__
        )
        self.id = id
        super().__init__(f"{self.entity_type} with ID {id!r} does not exist.")


class ValidationError(DomainError):
    """Raised when an operation violates a business rule."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)
