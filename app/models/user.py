# app/models/user.py
from pydantic import BaseModel, Field


class UserModel(BaseModel):
    """Database model for users. The password is stored exactly as given."""
    userName: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)

    model_config = {
        "json_schema_extra": {
            "example": {
                "userName": "admin",
                "password": "admin123",
                "name": "Admin User"
            }
        }
    }
