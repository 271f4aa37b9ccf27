"""
User management API routes
All data access goes through the users/posts service layer.
"""

import logging
from typing import List
from fastapi import APIRouter, HTTPException, Response

from models.user import User, UserCreateRequest, UserUpdateRequest
from models.post import Post
from services.users_service import get_users_service
from services.posts_service import get_posts_service
from utils.helpers import raise_for_service_error

router = APIRouter()
logger = logging.getLogger(__name__)

@router.post("", response_model=User, status_code=201)
async def create_user(request: UserCreateRequest):
    """Create a new user"""
    users_service = get_users_service()
    
    try:
        result = await users_service.create_user(
            name=request.name,
            username=request.username,
            email=request.email
        )
        raise_for_service_error(result)
        return User.model_validate(result.data[0])
        
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to create user: {e}")
        raise HTTPException(status_code=500, detail=f"Service error: {str(e)}")

@router.get("", response_model=List[User])
async def list_users():
    """List all users in creation order"""
    result = await get_users_service().list_users()
    raise_for_service_error(result)
    return [User.model_validate(record) for record in result.data]

@router.get("/{user_id}", response_model=User)
async def get_user(user_id: int):
    """Get user details"""
    result = await get_users_service().get_user_by_id(user_id)
    raise_for_service_error(result)
    return User.model_validate(result.data[0])

@router.get("/{user_id}/posts", response_model=List[Post])
async def get_user_posts(user_id: int):
    """
    Get posts written by a user
    
    The user itself is not looked up: an unknown or deleted user simply has
    no posts, or only orphaned ones.
    """
    result = await get_posts_service().get_posts_by_user_id(user_id)
    raise_for_service_error(result)
    return [Post.model_validate(record) for record in result.data]

@router.patch("/{user_id}", response_model=User)
async def update_user(user_id: int, request: UserUpdateRequest):
    """Update user details; omitted fields keep their current value"""
    users_service = get_users_service()
    
    try:
        result = await users_service.update_user(
            user_id,
            name=request.name,
            username=request.username,
            email=request.email
        )
        raise_for_service_error(result)
        return User.model_validate(result.data[0])
        
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to update user: {e}")
        raise HTTPException(status_code=500, detail=f"Service error: {str(e)}")

@router.delete("/{user_id}", status_code=204, response_class=Response)
async def delete_user(user_id: int):
    """Delete a user. Posts by this user are not removed."""
    result = await get_users_service().delete_user(user_id)
    raise_for_service_error(result)
    return Response(status_code=204)
