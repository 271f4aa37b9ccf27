"""
In-memory entity stores

Each resource kind (users, posts) lives in one EntityStore for the life of the
process. Records are plain dicts keyed by an auto-incrementing integer id;
restarting the server wipes everything.
"""

import logging
from typing import Any, Dict, List

logger = logging.getLogger(__name__)

RESOURCES = ("users", "posts")


class RecordNotFoundError(LookupError):
    """Raised when no record exists for the requested id"""

    def __init__(self, resource_name: str, record_id: int):
        self.resource_name = resource_name
        self.record_id = record_id
        super().__init__(f"{resource_name} record not found with ID: {record_id}")


class EntityStore:
    """Insertion-ordered collection of records for a single resource kind"""

    def __init__(self, resource_name: str):
        self.resource_name = resource_name
        self._records: Dict[int, Dict[str, Any]] = {}
        self._next_id = 1

    def create(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        """
        Store a new record and assign it the next id

        Args:
            fields: Field values for the record (any "id" key is ignored)

        Returns:
            Copy of the stored record
        """
        record = {"id": self._next_id, **{k: v for k, v in fields.items() if k != "id"}}
        self._records[record["id"]] = record
        self._next_id += 1
        return dict(record)

    def list(self) -> List[Dict[str, Any]]:
        """All records in insertion order"""
        return [dict(record) for record in self._records.values()]

    def get(self, record_id: int) -> Dict[str, Any]:
        return dict(self._find(record_id))

    def filter_by(self, field_name: str, value: Any) -> List[Dict[str, Any]]:
        """Records whose field equals value, in insertion order; empty when nothing matches"""
        return [dict(record) for record in self._records.values() if record.get(field_name) == value]

    def update(self, record_id: int, fields: Dict[str, Any]) -> Dict[str, Any]:
        """
        Shallow-merge fields over an existing record

        Provided keys overwrite, everything else is retained. The id is never
        rewritten.

        Raises:
            RecordNotFoundError: if the id is absent
        """
        existing = self._find(record_id)
        merged = {**existing, **{k: v for k, v in fields.items() if k != "id"}}
        self._records[record_id] = merged
        return dict(merged)

    def delete(self, record_id: int) -> None:
        self._find(record_id)
        del self._records[record_id]

    def count(self) -> int:
        return len(self._records)

    def _find(self, record_id: int) -> Dict[str, Any]:
        record = self._records.get(record_id)
        if record is None:
            raise RecordNotFoundError(self.resource_name, record_id)
        return record


# Global stores, one per resource kind
_stores: Dict[str, EntityStore] = {}


def init_stores():
    """Create empty stores for every resource kind"""
    for resource_name in RESOURCES:
        _stores[resource_name] = EntityStore(resource_name)
    logger.info(f"In-memory stores initialized: {', '.join(RESOURCES)}")


def close_stores():
    """Drop all stored records"""
    _stores.clear()
    logger.info("In-memory stores cleared")


def reset_stores():
    close_stores()
    init_stores()


def get_store(resource_name: str) -> EntityStore:
    """Get the store for a resource kind, creating it on first use"""
    if resource_name not in RESOURCES:
        raise ValueError(f"Unknown resource: {resource_name}")
    if resource_name not in _stores:
        _stores[resource_name] = EntityStore(resource_name)
    return _stores[resource_name]
