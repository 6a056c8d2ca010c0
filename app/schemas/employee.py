"""
Employee schema models for API responses.
"""
from datetime import datetime
from typing import List

from pydantic import BaseModel, Field

from app.models.employee import Gender


class EmployeeBase(BaseModel):
    """Base employee schema with common fields."""
    name: str
    email: str
    mobileNo: str
    designation: str
    gender: Gender
    course: List[str] = []
    imgUpload: str


class EmployeeResponse(EmployeeBase):
    """Schema for employee responses."""
    id: str = Field(..., alias="_id")
    createDate: datetime

    model_config = {
        "populate_by_name": True
    }
