"""
Store error classification.

Turns failures raised by the persistence layer into the short messages returned to clients.
The original error is never part of the message; callers log it themselves.
"""
from typing import Any, Dict

from pymongo.errors import OperationFailure

DUPLICATE_KEY_ERROR_CODE = 11000

DUPLICATE_EMAIL_MESSAGE = "Duplicate email entered."
DUPLICATE_MOBILE_MESSAGE = "Duplicate mobile number entered."
DUPLICATE_FIELD_MESSAGE = "Duplicate field value entered."
FAILED_REQUEST_MESSAGE = "Failed to process request."


class StoreValidationError(Exception):
    """Raised when a document does not satisfy its collection's store-level model."""

    def __init__(self, model_name: str, error: Exception):
        super().__init__(f"{model_name} validation failed: {error}")
        self.model_name = model_name
        self.error = error


def is_duplicate_key_error(error: Any) -> bool:
    """Check whether an error is a unique index violation."""
    return isinstance(error, OperationFailure) and error.code == DUPLICATE_KEY_ERROR_CODE


def _duplicate_fields(error: OperationFailure) -> Dict[str, Any]:
    details = error.details or {}
    fields = details.get("keyPattern") or details.get("keyValue")
    if fields:
        return fields

    # Older servers only report the index name, e.g. "index: email_1 dup key"
    message = str(details.get("errmsg") or error)
    return {name: 1 for name in ("email", "mobileNo") if f"index: {name}_" in message}


def classify_store_error(error: Any) -> str:
    """
    Derive a user-facing message from a failed store write.

    Args:
        error: Exception raised by the store or repository

    Returns:
        Message naming the duplicated field, or a generic failure message
    """
    if not is_duplicate_key_error(error):
        return FAILED_REQUEST_MESSAGE

    fields = _duplicate_fields(error)
    if "email" in fields:
        return DUPLICATE_EMAIL_MESSAGE
    if "mobileNo" in fields:
        return DUPLICATE_MOBILE_MESSAGE
    return DUPLICATE_FIELD_MESSAGE
