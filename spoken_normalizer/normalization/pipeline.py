"""Request orchestration for the normalize endpoint.

Runs both leaf normalizers on every request and folds their outcomes
into a single :class:`NormalizationResult`.  An email failure does not
skip time resolution; the ``error`` field reports the email failure
first because it is the one a caller must fix before booking.
"""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from datetime import date

from spoken_normalizer.core.constants import DEFAULT_TIME_ZONE, ErrorCode
from spoken_normalizer.normalization.email_normalizer import normalize_spoken_email
from spoken_normalizer.normalization.time_normalizer import (
    effective_time_zone,
    format_timestamp,
    resolve_time_phrase,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class NormalizationResult:
    normalized_email: str | None
    start_iso: str | None
    time_zone: str
    error: ErrorCode | None = None

    def to_dict(self) -> dict[str, str | None]:
        payload = asdict(self)
        payload["error"] = str(self.error) if self.error is not None else None
        return payload


def _error_for(normalized_email: str | None, start_iso: str | None) -> ErrorCode | None:
    if normalized_email is None:
        return ErrorCode.EMAIL_VALIDATION_ERROR
    if start_iso is None:
        return ErrorCode.TIME_PARSE_ERROR
    return None


def normalize_contact(
    raw_email: str | None,
    time_phrase: str | None,
    fallback_tz: str = DEFAULT_TIME_ZONE,
    *,
    today: date | None = None,
) -> NormalizationResult:
    normalized_email = normalize_spoken_email(raw_email or "")
    resolved = resolve_time_phrase(time_phrase or "", fallback_tz, today=today)
    start_iso = format_timestamp(resolved) if resolved is not None else None

    result = NormalizationResult(
        normalized_email=normalized_email,
        start_iso=start_iso,
        time_zone=effective_time_zone(resolved, fallback_tz),
        error=_error_for(normalized_email, start_iso),
    )
    logger.info(
        "normalize_contact: email_ok=%s time_ok=%s error=%s",
        normalized_email is not None,
        start_iso is not None,
        result.error,
    )
    return result
