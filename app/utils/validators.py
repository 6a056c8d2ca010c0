"""
Request payload checks run before anything is written to the store.
"""
import re
from typing import Any, Dict, Optional

EMAIL_PATTERN = (
    r'(([^<>()\[\]\\.,;:\s@"]+(\.[^<>()\[\]\\.,;:\s@"]+)*)|(".+"))'
    r'@((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\])|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))'
)
MOBILE_PATTERN = r'[0-9]{10}'

EMAIL_REGEX = re.compile(EMAIL_PATTERN, re.IGNORECASE | re.ASCII)
MOBILE_REGEX = re.compile(MOBILE_PATTERN, re.ASCII)

REQUIRED_FIELDS_MESSAGE = "Name, Email, Mobile No, and Image Upload are required."
INVALID_EMAIL_MESSAGE = "Invalid email format."
INVALID_MOBILE_MESSAGE = "Mobile No must be a 10-digit number."


def _as_text(value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


def is_valid_email(value: Any) -> bool:
    return EMAIL_REGEX.fullmatch(_as_text(value)) is not None


def is_valid_mobile(value: Any) -> bool:
    return MOBILE_REGEX.fullmatch(_as_text(value)) is not None


def validate_employee_data(data: Dict[str, Any]) -> Optional[str]:
    """
    Check an employee payload.

    Only name, email, mobileNo and imgUpload are checked here; the remaining
    required fields are enforced by the store-level model on write.

    Returns:
        The message of the first failing check, or None if the payload is valid
    """
    name = data.get("name")
    email = data.get("email")
    mobile_no = data.get("mobileNo")
    img_upload = data.get("imgUpload")

    if not name or not email or not mobile_no or not img_upload:
        return REQUIRED_FIELDS_MESSAGE

    if not is_valid_email(email):
        return INVALID_EMAIL_MESSAGE

    if not is_valid_mobile(mobile_no):
        return INVALID_MOBILE_MESSAGE

    return None
