"""Spoken time-phrase resolver.

Turns "Aug 19th 3 PM" into ``2025-08-19T15:00:00-04:00`` for a caller
supplied IANA zone.

Resolution order
----------------
1. Strip ordinal suffixes from one- or two-digit numbers ("19th" → "19").
2. Try the templates in :data:`TIME_TEMPLATES`, first match wins.  The
   order is part of the contract: a phrase that fits several shapes must
   always resolve through the same one.
3. Fall back to strict ISO 8601.  Naive values are read as wall time in
   the target zone; values with their own offset are converted into it.
4. Otherwise ``None``.

Templates without a year take the current year in the target zone.  Pass
*today* to pin it.

The offset is computed for the resolved date, so daylight saving is
honoured.  Wall times that fall in a spring-forward gap move forward by
the length of the gap.

Safety rule: raw phrases are never logged.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

_ORDINAL_RE = re.compile(r"\b(\d{1,2})(?:st|nd|rd|th)\b", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class TimeTemplate:
    """One accepted phrase layout.

    ``name`` uses the month/day/hour/meridiem notation callers see in
    docs (``MMM d h a``); ``directive`` is the equivalent ``strptime``
    format.  Yearless templates are completed with a year before parsing
    so that Feb 29 resolves in leap years.
    """

    name: str
    directive: str
    has_year: bool


TIME_TEMPLATES: tuple[TimeTemplate, ...] = (
    TimeTemplate("MMM d h a", "%b %d %I %p", has_year=False),
    TimeTemplate("MMMM d h a", "%B %d %I %p", has_year=False),
    TimeTemplate("MMM d ha", "%b %d %I%p", has_year=False),
    TimeTemplate("MMMM d ha", "%B %d %I%p", has_year=False),
    TimeTemplate("M/d h a", "%m/%d %I %p", has_year=False),
    TimeTemplate("M/d/yyyy h a", "%m/%d/%Y %I %p", has_year=True),
    TimeTemplate("MMM d yyyy h a", "%b %d %Y %I %p", has_year=True),
    TimeTemplate("MMMM d yyyy h a", "%B %d %Y %I %p", has_year=True),
)


def strip_ordinals(phrase: str) -> str:
    """Return *phrase* with day ordinals removed ("3rd" → "3")."""
    return _ORDINAL_RE.sub(r"\1", phrase)


def _load_zone(tz: str) -> ZoneInfo | None:
    if not tz:
        return None
    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError):
        logger.debug("time_normalizer: unknown time zone %r", tz)
        return None


def _in_zone(wall_time: datetime, zone: ZoneInfo) -> datetime:
    # Round-trip through UTC so gap times carry the offset actually in force.
    return wall_time.replace(tzinfo=zone).astimezone(timezone.utc).astimezone(zone)


def _match_template(text: str, template: TimeTemplate, year: int) -> datetime | None:
    if template.has_year:
        candidate, directive = text, template.directive
    else:
        candidate, directive = f"{year} {text}", f"%Y {template.directive}"
    try:
        return datetime.strptime(candidate, directive)
    except ValueError:
        return None


def _parse_iso(text: str, zone: ZoneInfo) -> datetime | None:
    if not text or any(ch.isspace() for ch in text):
        return None
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return _in_zone(parsed, zone)
    return parsed.astimezone(zone)


def resolve_time_phrase(
    phrase: str | None,
    tz: str,
    *,
    today: date | None = None,
) -> datetime | None:
    """Resolve *phrase* to an aware datetime in zone *tz*, or ``None``.

    Parameters
    ----------
    phrase:
        Spoken or semi-structured date/time, e.g. ``"August 19th 3pm"``.
    tz:
        IANA zone used to interpret the wall time.  Unknown zones yield
        ``None``.
    today:
        Reference date whose year completes yearless templates.  Defaults
        to the current date in *tz*.

    Returns
    -------
    datetime | None
        Aware datetime whose ``tzinfo`` is the :class:`ZoneInfo` for *tz*.
        Never raises.
    """
    if not phrase or not phrase.strip():
        return None

    zone = _load_zone(tz)
    if zone is None:
        return None

    text = strip_ordinals(phrase).strip()
    year = (today or datetime.now(zone).date()).year

    for template in TIME_TEMPLATES:
        wall_time = _match_template(text, template, year)
        if wall_time is not None:
            logger.debug("time_normalizer: matched template %r", template.name)
            return _in_zone(wall_time, zone)

    resolved = _parse_iso(text, zone)
    if resolved is None:
        logger.debug("time_normalizer: no template or ISO match (length=%d)", len(phrase))
    return resolved


def parse_time_phrase(
    phrase: str | None,
    tz: str,
    *,
    today: date | None = None,
) -> str | None:
    """Return *phrase* as an ISO 8601 string with explicit offset, or ``None``."""
    resolved = resolve_time_phrase(phrase, tz, today=today)
    return format_timestamp(resolved) if resolved is not None else None


def format_timestamp(resolved: datetime) -> str:
    """Render *resolved* as ISO 8601; fractions are kept to milliseconds."""
    timespec = "milliseconds" if resolved.microsecond else "seconds"
    return resolved.isoformat(timespec=timespec)


def effective_time_zone(resolved: datetime | None, fallback_tz: str) -> str:
    """Return the IANA name carried by *resolved*, else *fallback_tz*."""
    if resolved is None:
        return fallback_tz
    return getattr(resolved.tzinfo, "key", None) or fallback_tz
