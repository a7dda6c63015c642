"""
Generic entity service.

Architecture:
    API Layer (routers) → EntityService subclass → CrudRepository → Database

Each entity service wraps one repository and adds:
- field validation before every write
- existence checks for referenced entities before every write
- EntityNotFoundError when the target of a read/update/delete is missing
- DatabaseError for any storage failure, never a raw sqlite3 exception

Subclasses provide validate() and, where the entity references others,
check_references().
"""
import logging
import sqlite3
from contextlib import contextmanager
from typing import Any, Generic, Iterator, List, TypeVar

from core.exceptions import DatabaseError, EntityNotFoundError, ValidationError
from repositories.base import CrudRepository

logger = logging.getLogger(__name__)

E = TypeVar("E")
K = TypeVar("K")


class EntityService(Generic[E, K]):
    """
    Validation and error translation on top of one CrudRepository.

    Services are stateless; every method is a single request/response.
    """

    entity_name: str = ""

    def __init__(self, repository: CrudRepository[E, K]):
        """
        Initialize the service.

        Args:
            repository: Repository for the entity this service manages.
        """
        self._repo = repository

    # -------------------------------------------------------------------------
    # Hooks
    # -------------------------------------------------------------------------

    def validate(self, entity: E) -> None:
        """Raise ValidationError if any field breaks a rule."""

    def check_references(self, entity: E) -> None:
        """Raise EntityNotFoundError if a referenced entity does not exist."""

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def create(self, entity: E) -> E:
        """
        Validate and store a new entity.

        Returns:
            The stored entity.

        Raises:
            ValidationError: If a field breaks a rule.
            EntityNotFoundError: If a referenced entity does not exist.
            DatabaseError: If storage fails (ConstraintViolationError for a duplicate key).
        """
        key = self._prepare_write(entity, "create")

        with self._storage_errors("create"):
            created = self._repo.create(entity)
        if not created:
            raise DatabaseError(
                operation=f"create {self.entity_name}",
                message=f"no row inserted for {key!r}",
            )

        logger.info(f"{self.entity_name} created: {key}")
        return entity

    def get(self, key: K) -> E:
        """
        Fetch one entity.

        Raises:
            EntityNotFoundError: If no entity has this key.
            DatabaseError: If storage fails.
        """
        with self._storage_errors("read"):
            entity = self._repo.get_by_key(key)
        if entity is None:
            raise EntityNotFoundError(entity_type=self.entity_name, key=key)
        return entity

    def get_all(self) -> List[E]:
        """
        Fetch every entity. Order is not significant.

        Raises:
            DatabaseError: If storage fails.
        """
        with self._storage_errors("list"):
            return self._repo.get_all()

    def update(self, entity: E) -> E:
        """
        Validate and overwrite a stored entity (every non-key field).

        Returns:
            The entity as stored.

        Raises:
            ValidationError: If a field breaks a rule.
            EntityNotFoundError: If the entity or a referenced entity does not exist.
            DatabaseError: If storage fails.
        """
        key = self._prepare_write(entity, "update")

        with self._storage_errors("update"):
            updated = self._repo.update(entity)
        if not updated:
            raise EntityNotFoundError(entity_type=self.entity_name, key=key)

        logger.info(f"{self.entity_name} updated: {key}")
        return entity

    def delete(self, key: K) -> None:
        """
        Delete an entity.

        Raises:
            EntityNotFoundError: If no entity has this key.
            DatabaseError: If storage fails (ConstraintViolationError while still referenced).
        """
        with self._storage_errors("delete"):
            deleted = self._repo.delete(key)
        if not deleted:
            raise EntityNotFoundError(entity_type=self.entity_name, key=key)

        logger.info(f"{self.entity_name} deleted: {key}")

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _prepare_write(self, entity: E, operation: str) -> Any:
        try:
            self.validate(entity)
        except ValidationError as e:
            logger.warning(f"Rejected {self.entity_name} {operation}: {e.detail}")
            raise

        key = entity.key
        try:
            self.check_references(entity)
        except EntityNotFoundError as e:
            logger.warning(f"Rejected {self.entity_name} {operation} for {key}: {e.detail}")
            raise
        return key

    def _require(self, repository: CrudRepository, entity_type: str, key: Any, field: str) -> None:
        """Raise EntityNotFoundError unless ``repository`` holds ``key``."""
        with self._storage_errors("check reference"):
            found = repository.exists(key)
        if not found:
            raise EntityNotFoundError(entity_type=entity_type, key=key, reference=field)

    @contextmanager
    def _storage_errors(self, operation: str) -> Iterator[None]:
        """Wrap any raw sqlite3 or integer overflow error escaping a repository as DatabaseError."""
        try:
            yield
        except (sqlite3.Error, OverflowError) as e:
            logger.error(f"Database error during {operation} {self.entity_name}: {e}", exc_info=True)
            raise DatabaseError(operation=f"{operation} {self.entity_name}", message=str(e)) from e
