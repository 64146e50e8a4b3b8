"""
Structured error body returned by every Epic service.
"""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ErrorBody(BaseModel):
    """{"errorCode": ..., "errorMessage": ..., "numericErrorCode": ..., ...}"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    error_code: str
    error_message: Optional[str] = None
    message_vars: list[Any] = []
    numeric_error_code: Optional[int] = None
    originating_service: Optional[str] = None
    intent: Optional[str] = None
    challenge: Optional[str] = None  # two-factor errors only
