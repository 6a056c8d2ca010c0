"""
Auth service for login.

Passwords are stored and compared in plaintext. This matches the existing user
records; switching to hashing changes the stored format and needs a migration.
"""
from typing import Any, Dict, Optional

from fastapi import HTTPException, status

from app.domains.users.service import UserService

INVALID_CREDENTIALS_MESSAGE = "Invalid username or password"
LOGIN_SUCCESS_MESSAGE = "Login successful"


class AuthService:
    """
    Service for authentication.
    """

    def __init__(self, user_service: UserService):
        self.user_service = user_service

    async def authenticate_user(self, user_name: Any, password: Any) -> Optional[Dict[str, Any]]:
        """
        Authenticate a user with user name and password.

        Args:
            user_name: User name from the request
            password: Password from the request

        Returns:
            User document if authentication successful, None otherwise
        """
        # Anything but plain strings could smuggle query operators into the lookup
        if not isinstance(user_name, str) or not isinstance(password, str):
            return None

        user = await self.user_service.get_user_by_user_name(user_name)
        if not user:
            return None

        if password != user.get("password"):
            return None

        return user

    async def login(self, user_name: Any, password: Any) -> Dict[str, str]:
        """
        Login a user.

        Args:
            user_name: User name
            password: User password

        Returns:
            Dict with success message, user ID and name

        Raises:
            HTTPException: If authentication fails, with the same message whichever check failed
        """
        user = await self.authenticate_user(user_name, password)
        if not user:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=INVALID_CREDENTIALS_MESSAGE
            )

        return {
            "message": LOGIN_SUCCESS_MESSAGE,
            "userId": str(user["_id"]),
            "name": user.get("name")
        }
