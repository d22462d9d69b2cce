"""Normalization package.

One module per spoken field type.  Each normalizer takes a transcribed
phrase and returns a strict canonical form, or ``None`` when the phrase
cannot be read.  Normalizers never raise on bad input.

``pipeline.normalize_contact`` combines them for the HTTP layer.
"""
from spoken_normalizer.normalization.email_normalizer import normalize_spoken_email
from spoken_normalizer.normalization.pipeline import NormalizationResult, normalize_contact
from spoken_normalizer.normalization.time_normalizer import (
    effective_time_zone,
    format_timestamp,
    parse_time_phrase,
    resolve_time_phrase,
)

__all__ = [
    "NormalizationResult",
    "effective_time_zone",
    "format_timestamp",
    "normalize_contact",
    "normalize_spoken_email",
    "parse_time_phrase",
    "resolve_time_phrase",
]
