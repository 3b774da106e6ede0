"""
Base repository class providing common in-memory storage operations.

`InMemoryRepository` owns a single ordered collection of records plus the id counter used
to number them. Model-specific repositories inherit from it and add their own creation
rules; the base only knows how to number, list, find and remove records.

Invariants:
  - ids come from a counter that only moves forward, so an id is never handed out twice,
    even after deletions (the collection size is never used to derive an id).
  - insertion order is preserved.

There is no locking: one repository instance is meant to be used from a single event loop
(single writer). Construct one per application instance, or one per test.
"""
import logging
from typing import Generic, Protocol, TypeVar

from employee_directory.exceptions.base import NotFoundError
from employee_directory.exceptions.mapper import with_error_handling

logger = logging.getLogger(__name__)


class HasId(Protocol):
    id: int


ModelType = TypeVar("ModelType", bound=HasId)


class InMemoryRepository(Generic[ModelType]):
    """
    Generic base repository over a Python list.

    Type Parameters:
        ModelType: the record type this repository manages (must expose an int `id`).
    """

    # Used in log events and NOT_FOUND messages; subclasses override.
    entity_name = "Record"

    def __init__(self) -> None:
        self._records: list[ModelType] = []
        self._last_id = 0

    def __len__(self) -> int:
        return len(self._records)

    # =================================================================================================================
    # Helpers for subclasses
    # =================================================================================================================

    def _next_id(self) -> int:
        self._last_id += 1
        return self._last_id

    def _append(self, record: ModelType) -> ModelType:
        self._records.append(record)
        return record

    def _index_of(self, record_id: int) -> int:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        logger.info(
            "repo.lookup.not_found",
            extra={"model": self.entity_name, "id": record_id},
        )
        raise NotFoundError(f"{self.entity_name} not found", meta={"id": record_id})

    # =================================================================================================================
    # Read / delete operations
    # =================================================================================================================

    def count(self) -> int:
        return len(self._records)

    @with_error_handling
    async def list_all(self) -> list[ModelType]:
        """
        Return every record in insertion order.

        The list is a fresh copy; the records in it are the canonical instances.
        """
        return list(self._records)

    @with_error_handling
    async def get_by_id(self, record_id: int) -> ModelType:
        """
        Raises:
            NotFoundError: if no record has this id.
        """
        return self._records[self._index_of(record_id)]

    @with_error_handling
    async def delete_by_id(self, record_id: int) -> None:
        """
        Remove exactly the record with this id.

        Raises:
            NotFoundError: if no record has this id.
        """
        index = self._index_of(record_id)
        del self._records[index]
        logger.info(
            "repo.delete.success",
            extra={"model": self.entity_name, "id": record_id, "remaining": len(self._records)},
        )

    def clear(self) -> None:
        """Drop every record. The id counter is not reset."""
        self._records.clear()
