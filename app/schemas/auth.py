from pydantic import BaseModel


class LoginResponse(BaseModel):
    """Schema for a successful login"""
    message: str
    userId: str
    name: str


class MessageResponse(BaseModel):
    """Schema for plain confirmation messages"""
    message: str
