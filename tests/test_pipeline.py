"""Tests for spoken_normalizer.normalization.pipeline."""
from __future__ import annotations

from datetime import date

from spoken_normalizer.core.constants import ErrorCode
from spoken_normalizer.normalization.pipeline import NormalizationResult, normalize_contact

NY = "America/New_York"
IN_2025 = date(2025, 1, 1)


class TestNormalizeContact:
    def test_both_fields_resolve(self) -> None:
        result = normalize_contact("j o h n dot doe at g mail dot com", "Aug 19th 3 PM", NY, today=IN_2025)

        assert result == NormalizationResult(
            normalized_email="john.doe@gmail.com",
            start_iso="2025-08-19T15:00:00-04:00",
            time_zone=NY,
            error=None,
        )

    def test_email_failure_still_resolves_time(self) -> None:
        result = normalize_contact("not an email at all", "Aug 19 2025 3 PM", NY)

        assert result.normalized_email is None
        assert result.start_iso == "2025-08-19T15:00:00-04:00"
        assert result.error is ErrorCode.EMAIL_VALIDATION_ERROR

    def test_time_failure_keeps_email_and_fallback_zone(self) -> None:
        result = normalize_contact("kim at gmail dot com", "gibberish", "Europe/Paris")

        assert result.normalized_email == "kim@gmail.com"
        assert result.start_iso is None
        assert result.time_zone == "Europe/Paris"
        assert result.error is ErrorCode.TIME_PARSE_ERROR

    def test_email_error_reported_when_both_fail(self) -> None:
        result = normalize_contact("nothing here", "gibberish", NY)

        assert result.error is ErrorCode.EMAIL_VALIDATION_ERROR
        assert result.start_iso is None

    def test_missing_inputs(self) -> None:
        result = normalize_contact(None, None)

        assert result.normalized_email is None
        assert result.start_iso is None
        assert result.time_zone == NY
        assert result.error is ErrorCode.EMAIL_VALIDATION_ERROR

    def test_unknown_fallback_zone_is_echoed(self) -> None:
        result = normalize_contact("kim at gmail dot com", "Aug 19 2025 3 PM", "Mars/Olympus")

        assert result.start_iso is None
        assert result.time_zone == "Mars/Olympus"
        assert result.error is ErrorCode.TIME_PARSE_ERROR

    def test_zone_follows_fallback_when_resolved(self) -> None:
        result = normalize_contact("kim at gmail dot com", "Aug 19 2025 3 PM", "America/Los_Angeles")

        assert result.start_iso == "2025-08-19T15:00:00-07:00"
        assert result.time_zone == "America/Los_Angeles"


class TestNormalizationResult:
    def test_to_dict_uses_plain_error_code(self) -> None:
        result = NormalizationResult(
            normalized_email=None,
            start_iso=None,
            time_zone=NY,
            error=ErrorCode.EMAIL_VALIDATION_ERROR,
        )

        assert result.to_dict() == {
            "normalized_email": None,
            "start_iso": None,
            "time_zone": NY,
            "error": "email_validation_error",
        }

    def test_to_dict_without_error(self) -> None:
        result = NormalizationResult("a@b.co", "2025-08-19T15:00:00-04:00", NY)

        assert result.to_dict()["error"] is None
