"""
Auth API routes for signup and login.
"""
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status

from app.dependencies.payload import read_payload
from app.dependencies.services import get_auth_service, get_user_service
from app.domains.auth.service import AuthService
from app.domains.users.service import UserService
from app.schemas.auth import LoginResponse
from app.schemas.user import UserResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/signUp", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def sign_up(
    user_data: Dict[str, Any] = Depends(read_payload),
    user_service: UserService = Depends(get_user_service)
):
    """
    Register a new user.

    Args:
        user_data: userName, password and name

    Returns:
        Created user
    """
    logger.debug(f"Sign up requested for user name {user_data.get('userName')!r}")
    try:
        return await user_service.create_user(user_data)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Sign up error: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error"
        )


@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: Dict[str, Any] = Depends(read_payload),
    auth_service: AuthService = Depends(get_auth_service)
):
    """
    Login with user name and password.

    Args:
        credentials: userName and password

    Returns:
        Success message with the user's ID and name
    """
    try:
        return await auth_service.login(credentials.get("userName"), credentials.get("password"))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Login error: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error"
        )
