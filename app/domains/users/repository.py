"""
User repository for database operations.
"""
from typing import Any, Dict, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.db.base_repository import BaseRepository
from app.db.mongodb import USERS_COLLECTION
from app.models.user import UserModel


class UserRepository(BaseRepository):
    """
    Repository for user data access.
    """

    model = UserModel

    def __init__(self, database: AsyncIOMotorDatabase):
        """Initialize with users collection."""
        super().__init__(database[USERS_COLLECTION])

    async def find_by_user_name(self, user_name: str) -> Optional[Dict[str, Any]]:
        """
        Find a user by user name.

        Args:
            user_name: User name

        Returns:
            User document or None if not found
        """
        return await self.find_one({"userName": user_name})
