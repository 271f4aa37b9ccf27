"""
Users service - business logic for user management
"""

import logging
from typing import Optional
from services.base_service import BaseService, ServiceResult

logger = logging.getLogger(__name__)

class UsersService(BaseService):
    """Service for user management operations"""
    
    def __init__(self):
        super().__init__("users", "User")
    
    async def create_user(self, name: str, username: str, email: str) -> ServiceResult:
        """
        Create a new user
        
        Args:
            name: Full name of the user
            username: Handle of the user
            email: Email address of the user
            
        Returns:
            ServiceResult with created user data
        """
        logger.info(f"Creating new user: {username}")
        return await self.create({"name": name, "username": username, "email": email})
    
    async def list_users(self) -> ServiceResult:
        return await self.read()
    
    async def get_user_by_id(self, user_id: int) -> ServiceResult:
        return await self.get_by_id(user_id)
    
    async def update_user(
        self,
        user_id: int,
        name: Optional[str] = None,
        username: Optional[str] = None,
        email: Optional[str] = None
    ) -> ServiceResult:
        """
        Update user fields; fields left as None keep their current value
        
        Returns:
            ServiceResult with merged user data
        """
        update_data = {}
        
        if name is not None:
            update_data["name"] = name
        if username is not None:
            update_data["username"] = username
        if email is not None:
            update_data["email"] = email
        
        logger.info(f"Updating user {user_id}: {sorted(update_data)}")
        return await self.update(user_id, update_data)
    
    async def delete_user(self, user_id: int) -> ServiceResult:
        """Delete a user. Posts referencing the user are left in place."""
        logger.info(f"Deleting user {user_id}")
        return await self.delete(user_id)


# Global service instance
_users_service = None

def get_users_service() -> UsersService:
    """Get the global users service instance"""
    global _users_service
    if _users_service is None:
        _users_service = UsersService()
    return _users_service
