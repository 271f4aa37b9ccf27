"""
Posts service - business logic for post management
"""

import logging
from typing import Optional
from services.base_service import BaseService, ServiceResult

logger = logging.getLogger(__name__)

class PostsService(BaseService):
    """Service for post management operations"""
    
    def __init__(self):
        super().__init__("posts", "Post")
    
    async def create_post(self, user_id: int, title: str) -> ServiceResult:
        """
        Create a new post
        
        Args:
            user_id: Id of the authoring user (existence is not checked)
            title: Post title
            
        Returns:
            ServiceResult with created post data
        """
        logger.info(f"Creating new post for user {user_id}")
        return await self.create({"userId": user_id, "title": title})
    
    async def list_posts(self) -> ServiceResult:
        return await self.read()
    
    async def get_post_by_id(self, post_id: int) -> ServiceResult:
        return await self.get_by_id(post_id)
    
    async def get_posts_by_user_id(self, user_id: int) -> ServiceResult:
        """
        Get all posts written by a user
        
        Args:
            user_id: Id of the authoring user
            
        Returns:
            ServiceResult with matching posts in creation order; empty when none match
        """
        return await self.get_by_field("userId", user_id)
    
    async def update_post(self, post_id: int, title: Optional[str] = None) -> ServiceResult:
        """Update the post title; the author reference is fixed at creation"""
        update_data = {}
        if title is not None:
            update_data["title"] = title
        
        logger.info(f"Updating post {post_id}")
        return await self.update(post_id, update_data)
    
    async def delete_post(self, post_id: int) -> ServiceResult:
        logger.info(f"Deleting post {post_id}")
        return await self.delete(post_id)


# Global service instance
_posts_service = None

def get_posts_service() -> PostsService:
    """Get the global posts service instance"""
    global _posts_service
    if _posts_service is None:
        _posts_service = PostsService()
    return _posts_service
