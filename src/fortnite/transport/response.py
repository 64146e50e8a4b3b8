"""
Response parsing: turns raw httpx responses into decoded bodies or typed errors.
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from fortnite.constants import TWO_FACTOR_REQUIRED_CODE
from fortnite.errors import ServiceError, TwoFactorRequired
from fortnite.models.error import ErrorBody

logger = logging.getLogger(__name__)


def _decode(resp: httpx.Response) -> Any:
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return resp.text


def parse_response(resp: httpx.Response) -> Any:
    """Return the decoded body of a 2xx response, raise a ServiceError otherwise."""
    if resp.is_success:
        return _decode(resp)

    body = _decode(resp)
    try:
        error = ErrorBody.model_validate(body)
    except ValidationError:
        logger.warning("Unrecognised error body (HTTP %s)", resp.status_code)
        raw = body if isinstance(body, str) else resp.text
        raise ServiceError("http_error", f"HTTP {resp.status_code}: {raw[:200]}", resp.status_code, body)

    if error.error_code == TWO_FACTOR_REQUIRED_CODE:
        if not error.challenge:
            raise ServiceError(error.error_code, "Two factor error without a challenge token",
                               resp.status_code, body)
        raise TwoFactorRequired(error.challenge, error.error_message or "Two factor authentication is required.",
                                resp.status_code, body)

    raise ServiceError(error.error_code, error.error_message or f"HTTP {resp.status_code}", resp.status_code, body)
