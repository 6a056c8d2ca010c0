"""
User schema models for API responses.
"""
from pydantic import BaseModel, Field


class UserResponse(BaseModel):
    """Schema for user responses. The password is never returned."""
    id: str = Field(..., alias="_id")
    userName: str
    name: str

    model_config = {
        "populate_by_name": True
    }
