"""
User service for business logic.
"""
import logging
from typing import Any, Dict, Optional

from fastapi import HTTPException, status
from pymongo.errors import OperationFailure

from app.core.errors import StoreValidationError
from app.domains.users.repository import UserRepository

logger = logging.getLogger(__name__)

CREATE_USER_FAILED_MESSAGE = "Failed to create user"


class UserService:
    """
    Service for user-related business logic.
    """

    def __init__(self, user_repo: UserRepository):
        """
        Initialize with user repository.

        Args:
            user_repo: User repository instance
        """
        self.user_repo = user_repo

    async def get_user_by_user_name(self, user_name: str) -> Optional[Dict[str, Any]]:
        """
        Get user by user name.

        Args:
            user_name: User name

        Returns:
            User document or None if not found
        """
        return await self.user_repo.find_by_user_name(user_name)

    async def create_user(self, user_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a new user. Invalid data and a taken user name fail the same way.

        Args:
            user_data: User data

        Returns:
            Created user document

        Raises:
            HTTPException: If the store rejects the user
        """
        try:
            return await self.user_repo.create(user_data)
        except (StoreValidationError, OperationFailure) as e:
            logger.error(f"Error creating user: {str(e)}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=CREATE_USER_FAILED_MESSAGE
            )
