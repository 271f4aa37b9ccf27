"""
Base service layer for unified in-memory store operations
"""

import logging
from typing import Dict, Any, List, Optional
from dataclasses import dataclass

from database.store import EntityStore, RecordNotFoundError, get_store

logger = logging.getLogger(__name__)

@dataclass
class ServiceResult:
    """Result from service operation"""
    success: bool
    data: Optional[List[Dict[str, Any]]] = None
    count: int = 0
    error: Optional[str] = None
    error_type: Optional[str] = None

class BaseService:
    """Base service that wraps one EntityStore for unified data access"""

    def __init__(self, resource_name: str, entity_label: str):
        self.resource_name = resource_name
        self.entity_label = entity_label
        logger.info(f"BaseService initialized for resource: {resource_name}")

    @property
    def store(self) -> EntityStore:
        # Looked up per call so a store reset is picked up by long-lived services
        return get_store(self.resource_name)

    async def create(self, data: Dict[str, Any]) -> ServiceResult:
        """
        Create a new record

        Args:
            data: Dictionary of field values to insert

        Returns:
            ServiceResult with created record data
        """
        try:
            record = self.store.create(data)
            return ServiceResult(success=True, data=[record], count=1)
        except Exception as e:
            logger.error(f"Create operation failed for {self.resource_name}: {e}", exc_info=True)
            return ServiceResult(success=False, error=str(e), error_type="EXECUTION_ERROR")

    async def read(self, filters: Optional[Dict[str, Any]] = None) -> ServiceResult:
        """
        Read records in insertion order

        Args:
            filters: Dictionary of equality filters {field_name: value}

        Returns:
            ServiceResult with matched records (possibly empty)
        """
        try:
            records = self.store.list()
            for field_name, value in (filters or {}).items():
                records = [record for record in records if record.get(field_name) == value]
            return ServiceResult(success=True, data=records, count=len(records))
        except Exception as e:
            logger.error(f"Read operation failed for {self.resource_name}: {e}")
            return ServiceResult(success=False, error=str(e), error_type="EXECUTION_ERROR")

    async def get_by_id(self, record_id: int) -> ServiceResult:
        """
        Get a single record by primary key

        Args:
            record_id: Primary key value

        Returns:
            ServiceResult with single record, or RESOURCE_NOT_FOUND
        """
        try:
            record = self.store.get(record_id)
            return ServiceResult(success=True, data=[record], count=1)
        except RecordNotFoundError:
            return self._not_found(record_id)
        except Exception as e:
            logger.error(f"Get operation failed for {self.resource_name}: {e}")
            return ServiceResult(success=False, error=str(e), error_type="EXECUTION_ERROR")

    async def get_by_field(self, field_name: str, value: Any) -> ServiceResult:
        """Get every record whose field equals value; empty data rather than an error when none match"""
        try:
            records = self.store.filter_by(field_name, value)
            return ServiceResult(success=True, data=records, count=len(records))
        except Exception as e:
            logger.error(f"Filter operation failed for {self.resource_name}: {e}")
            return ServiceResult(success=False, error=str(e), error_type="EXECUTION_ERROR")

    async def update(self, record_id: int, data: Dict[str, Any]) -> ServiceResult:
        """
        Shallow-merge field values into an existing record

        Args:
            record_id: Primary key value of record to update
            data: Dictionary of field values to update (may be empty)

        Returns:
            ServiceResult with merged record data
        """
        try:
            record = self.store.update(record_id, data)
            return ServiceResult(success=True, data=[record], count=1)
        except RecordNotFoundError:
            return self._not_found(record_id)
        except Exception as e:
            logger.error(f"Update operation failed for {self.resource_name}: {e}")
            return ServiceResult(success=False, error=str(e), error_type="EXECUTION_ERROR")

    async def delete(self, record_id: int) -> ServiceResult:
        """
        Delete a record by primary key

        Args:
            record_id: Primary key value of record to delete

        Returns:
            ServiceResult with the deleted record data
        """
        try:
            record = self.store.get(record_id)
            self.store.delete(record_id)
            return ServiceResult(success=True, data=[record], count=1)
        except RecordNotFoundError:
            return self._not_found(record_id)
        except Exception as e:
            logger.error(f"Delete operation failed for {self.resource_name}: {e}")
            return ServiceResult(success=False, error=str(e), error_type="EXECUTION_ERROR")

    def count(self) -> int:
        return self.store.count()

    def _not_found(self, record_id: int) -> ServiceResult:
        return ServiceResult(
            success=False,
            error=f"{self.entity_label} with ID {record_id} not found",
            error_type="RESOURCE_NOT_FOUND"
        )
