"""
Post management API routes
"""

import logging
from typing import List, Optional
from fastapi import APIRouter, HTTPException, Query, Response

from models.post import Post, PostCreateRequest, PostUpdateRequest
from services.posts_service import get_posts_service
from utils.helpers import raise_for_service_error

router = APIRouter()
logger = logging.getLogger(__name__)

@router.post("", response_model=Post, status_code=201)
async def create_post(request: PostCreateRequest):
    """Create a new post"""
    posts_service = get_posts_service()
    
    try:
        result = await posts_service.create_post(user_id=request.user_id, title=request.title)
        raise_for_service_error(result)
        return Post.model_validate(result.data[0])
        
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to create post: {e}")
        raise HTTPException(status_code=500, detail=f"Service error: {str(e)}")

@router.get("", response_model=List[Post])
async def list_posts(user_id: Optional[int] = Query(None, alias="userId")):
    """List posts, optionally only those written by one user"""
    posts_service = get_posts_service()
    
    if user_id is not None:
        result = await posts_service.get_posts_by_user_id(user_id)
    else:
        result = await posts_service.list_posts()
    
    raise_for_service_error(result)
    return [Post.model_validate(record) for record in result.data]

@router.get("/{post_id}", response_model=Post)
async def get_post(post_id: int):
    """Get post details"""
    result = await get_posts_service().get_post_by_id(post_id)
    raise_for_service_error(result)
    return Post.model_validate(result.data[0])

@router.patch("/{post_id}", response_model=Post)
async def update_post(post_id: int, request: PostUpdateRequest):
    """Update a post title"""
    posts_service = get_posts_service()
    
    try:
        result = await posts_service.update_post(post_id, title=request.title)
        raise_for_service_error(result)
        return Post.model_validate(result.data[0])
        
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to update post: {e}")
        raise HTTPException(status_code=500, detail=f"Service error: {str(e)}")

@router.delete("/{post_id}", status_code=204, response_class=Response)
async def delete_post(post_id: int):
    """Delete a post"""
    result = await get_posts_service().delete_post(post_id)
    raise_for_service_error(result)
    return Response(status_code=204)
