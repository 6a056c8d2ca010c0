"""
Request body parsing shared by the write endpoints.

Bodies are taken as plain dicts rather than Pydantic models so that the handlers
decide which message a bad payload gets.
"""
import json
import logging
from typing import Any, Dict

from fastapi import HTTPException, Request, status

logger = logging.getLogger(__name__)

INVALID_PAYLOAD_MESSAGE = "Invalid request payload"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


async def read_payload(request: Request) -> Dict[str, Any]:
    """
    Read a JSON or url-encoded form body into a dict.
    An empty body reads as an empty dict.

    Raises:
        HTTPException: If the body is malformed or is not an object
    """
    content_type = request.headers.get("content-type", "")

    if content_type.startswith(FORM_CONTENT_TYPE):
        form = await request.form()
        return _form_to_dict(form.multi_items())

    body = await request.body()
    if not body.strip():
        return {}

    try:
        payload = json.loads(body)
    except ValueError:
        logger.warning(f"Malformed JSON body on {request.url.path}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=INVALID_PAYLOAD_MESSAGE
        )

    if not isinstance(payload, dict):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=INVALID_PAYLOAD_MESSAGE
        )

    return payload


def _form_to_dict(items) -> Dict[str, Any]:
    # Repeated keys and "key[]" keys collect into lists
    result: Dict[str, Any] = {}
    for key, value in items:
        if key.endswith("[]"):
            result.setdefault(key[:-2], []).append(value)
        elif key in result:
            if not isinstance(result[key], list):
                result[key] = [result[key]]
            result[key].append(value)
        else:
            result[key] = value
    return result
