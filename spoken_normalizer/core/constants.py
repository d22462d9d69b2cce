"""Shared constants for the normalization service.

Error codes
-----------
The response ``error`` field carries at most one code.  An email failure
is reported ahead of a time failure, but both leaves always run.
"""
from __future__ import annotations

from enum import StrEnum

DEFAULT_TIME_ZONE = "America/New_York"


class ErrorCode(StrEnum):
    EMAIL_VALIDATION_ERROR = "email_validation_error"
    TIME_PARSE_ERROR = "time_parse_error"
