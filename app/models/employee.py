# app/models/employee.py
from datetime import datetime, timezone
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, Field, validator

from app.utils.validators import EMAIL_REGEX, MOBILE_REGEX


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"


def _coerce_text(v: Any) -> Any:
    # Numbers are stored as their text form, e.g. a numeric mobileNo
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return str(v)
    return v


def _wrap_list(v: Any) -> Any:
    # A single course arrives as a bare string
    if isinstance(v, str):
        return [v]
    return v


def _utc_now() -> datetime:
    return _to_bson_date(datetime.now(timezone.utc))


def _to_bson_date(v: datetime) -> datetime:
    # BSON dates are UTC with millisecond precision
    if v.tzinfo is None:
        v = v.replace(tzinfo=timezone.utc)
    else:
        v = v.astimezone(timezone.utc)
    return v.replace(microsecond=v.microsecond // 1000 * 1000)


def _check_email(v: Optional[str]) -> Optional[str]:
    if v is not None and not EMAIL_REGEX.fullmatch(v):
        raise ValueError("email does not match the email format")
    return v


def _check_mobile(v: Optional[str]) -> Optional[str]:
    if v is not None and not MOBILE_REGEX.fullmatch(v):
        raise ValueError("mobileNo must be exactly 10 digits")
    return v


class EmployeeModel(BaseModel):
    """Database model for employees"""
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    mobileNo: str = Field(..., min_length=1)
    designation: str = Field(..., min_length=1)
    gender: Gender
    course: List[str] = Field(default_factory=list)
    createDate: datetime = Field(default_factory=_utc_now)
    imgUpload: str = Field(..., min_length=1)

    model_config = {
        "use_enum_values": True,
        "json_schema_extra": {
            "example": {
                "name": "Asha Verma",
                "email": "asha.verma@example.com",
                "mobileNo": "9876543210",
                "designation": "HR",
                "gender": "Female",
                "course": ["MCA"],
                "imgUpload": "uploads/asha.png"
            }
        }
    }

    @validator("name", "email", "mobileNo", "designation", "imgUpload", pre=True)
    def coerce_text(cls, v):
        return _coerce_text(v)

    @validator("course", pre=True)
    def wrap_course(cls, v):
        return _wrap_list(v)

    @validator("email")
    def validate_email(cls, v):
        return _check_email(v)

    @validator("mobileNo")
    def validate_mobile(cls, v):
        return _check_mobile(v)

    @validator("createDate")
    def normalize_create_date(cls, v):
        return _to_bson_date(v)


class EmployeeUpdateModel(BaseModel):
    """Database model for the fields of an employee update; only present fields are checked"""
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = Field(None, min_length=1)
    mobileNo: Optional[str] = Field(None, min_length=1)
    designation: Optional[str] = Field(None, min_length=1)
    gender: Optional[Gender] = None
    course: Optional[List[str]] = None
    createDate: Optional[datetime] = None
    imgUpload: Optional[str] = Field(None, min_length=1)

    model_config = {
        "use_enum_values": True
    }

    @validator("*", pre=True)
    def reject_null(cls, v):
        if v is None:
            raise ValueError("field cannot be null")
        return v

    @validator("name", "email", "mobileNo", "designation", "imgUpload", pre=True)
    def coerce_text(cls, v):
        return _coerce_text(v)

    @validator("course", pre=True)
    def wrap_course(cls, v):
        return _wrap_list(v)

    @validator("email")
    def validate_email(cls, v):
        return _check_email(v)

    @validator("mobileNo")
    def validate_mobile(cls, v):
        return _check_mobile(v)

    @validator("createDate")
    def normalize_create_date(cls, v):
        return _to_bson_date(v)
