"""
Utility functions and helpers
"""

import logging
from fastapi import HTTPException

from services.base_service import ServiceResult

logger = logging.getLogger(__name__)

# ServiceResult.error_type -> HTTP status code
ERROR_STATUS_CODES = {
    "RESOURCE_NOT_FOUND": 404,
    "INVALID_REQUEST": 400,
}

def raise_for_service_error(result: ServiceResult) -> None:
    """Translate a failed ServiceResult into an HTTPException"""
    if result.success:
        return
    
    status_code = ERROR_STATUS_CODES.get(result.error_type, 500)
    if status_code >= 500:
        logger.error(f"Service failure ({result.error_type}): {result.error}")
    raise HTTPException(status_code=status_code, detail=result.error)
