"""
Health check API route
"""

from datetime import datetime
from fastapi import APIRouter

from services.users_service import get_users_service
from services.posts_service import get_posts_service

router = APIRouter()

@router.get("/")
async def health_check():
    """Health check with current record counts"""
    return {
        "status": "healthy",
        "timestamp": datetime.utcnow().isoformat(),
        "users": get_users_service().count(),
        "posts": get_posts_service().count()
    }
