from __future__ import annotations

from typing import Any, Dict, List


class ScoutsError(Exception):
    pass


class DomainValidationError(ScoutsError, ValueError):
    """A request violates a business rule of the application."""


class EntityNotFoundError(DomainValidationError):
    def __init__(self, entity: str, entity_id: int) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with id {entity_id} does not exist")


class DuplicateEntityError(DomainValidationError):
    pass


class OptimisticLockingError(ScoutsError):
    def __init__(self, entity: str) -> None:
        self.entity = entity
        super().__init__(f"{entity} was updated by another transaction")


class InvalidEntityError(DomainValidationError):
    """Data that passed request validation is rejected by a domain model."""

    def __init__(self, entity: str, errors: List[Dict[str, Any]]) -> None:
        self.entity = entity
        self.errors = errors
        details = "; ".join(f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in errors)
        super().__init__(f"Invalid {entity}: {details}")
