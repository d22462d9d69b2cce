"""Spoken email normalizer.

Rewrites a dictated email address ("j o h n dot doe at g mail dot com")
into a syntactically valid address ("john.doe@gmail.com").

Rules applied in order
----------------------
1. Lowercase, trim, pad with one space on each side and collapse
   whitespace runs.  The padding lets ``\\b`` anchor at the string edges.
2. Spoken symbols → ``@ . _ - +`` (whole word).
3. Spoken digits → ``0``-``9``.  ``to``/``too``/``two`` all map to ``2``,
   ``for`` to ``4`` and ``ate`` to ``8``.  A lone ``o`` is only read as
   zero when it sits next to a digit, so spelled-out names keep it.
4. Provider glue ("g mail" → "gmail", "yah hoo" → "yahoo", …).
5. Drop every remaining space.
6. Collapse repeated dots.
7. Full-match against the email shape; anything else is ``None``.

The order is load-bearing: later rules assume the symbols inserted by
earlier ones.

Safety rule: raw and normalized values are never logged.
"""
from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Spoken symbols
# ---------------------------------------------------------------------------

# (alternatives, symbol).  Alternatives ordered longest-first so that
# "at sign" is consumed whole instead of leaving a stray "sign" behind.
_SYMBOL_WORDS: tuple[tuple[str, str], ...] = (
    ("symbol at|at sign|at", "@"),
    ("period|dot", "."),
    ("under score|underscore", "_"),
    ("hyphen|dash", "-"),
    ("plus sign|plus", "+"),
)

_SYMBOL_RULES: tuple[tuple[re.Pattern[str], str], ...] = tuple(
    (re.compile(rf"\b(?:{words})\b", re.ASCII), f" {symbol} ")
    for words, symbol in _SYMBOL_WORDS
)

# ---------------------------------------------------------------------------
# Spoken digits
# ---------------------------------------------------------------------------

_DIGIT_WORDS: dict[str, str] = {
    "zero": "0",
    "oh": "0",
    "one": "1",
    "two": "2",
    "to": "2",
    "too": "2",
    "three": "3",
    "four": "4",
    "for": "4",
    "five": "5",
    "six": "6",
    "seven": "7",
    "eight": "8",
    "ate": "8",
    "nine": "9",
}

_DIGIT_WORD_RE = re.compile(
    r"\b(" + "|".join(sorted(_DIGIT_WORDS, key=len, reverse=True)) + r")\b",
    re.ASCII,
)

# Lone "o" beside a digit ("o o seven", "one o five").
_LONE_O_RE = re.compile(r"(?<=\d )o\b|\bo(?= \d)", re.ASCII)

# ---------------------------------------------------------------------------
# Provider glue and whitespace tightening
# ---------------------------------------------------------------------------

_PROVIDER_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\bg\s*mail\b", re.ASCII), "gmail"),
    (re.compile(r"\bhot\s*mail\b", re.ASCII), "hotmail"),
    (re.compile(r"\bout\s*look\b", re.ASCII), "outlook"),
    (re.compile(r"\byah+\s*h*oo\b", re.ASCII), "yahoo"),
    (re.compile(r"\bproton\s*mail\b", re.ASCII), "protonmail"),
)

_TIGHTEN_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\s*(?=[@.])|\s+(?=[a-z0-9_+-])"), ""),
    (re.compile(r"\s+"), ""),
    (re.compile(r"\.+"), "."),
)

_WHITESPACE_RE = re.compile(r"\s+")

EMAIL_RE = re.compile(r"[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}", re.IGNORECASE | re.ASCII)


def _apply(text: str, rules: tuple[tuple[re.Pattern[str], str], ...]) -> str:
    for pattern, replacement in rules:
        text = pattern.sub(replacement, text)
    return text


def _digits(text: str) -> str:
    text = _DIGIT_WORD_RE.sub(lambda m: _DIGIT_WORDS[m.group(1)], text)
    # Each pass can expose a new neighbour ("o o 7" → "o 0 7" → "0 0 7").
    while True:
        text, count = _LONE_O_RE.subn("0", text)
        if not count:
            return text


def normalize_spoken_email(raw: str | None) -> str | None:
    """Return the email address dictated in *raw*, or ``None``.

    Parameters
    ----------
    raw:
        Transcribed speech, e.g. ``"jane underscore smith at yahoo dot com"``.
        Case and spacing are irrelevant.

    Returns
    -------
    str | None
        A lowercase address matching :data:`EMAIL_RE`, or ``None`` when the
        rewritten text is not an email.  Never raises and never returns a
        partially normalized string.
    """
    if not raw or not raw.strip():
        return None

    text = _WHITESPACE_RE.sub(" ", f" {raw.lower().strip()} ")
    text = _apply(text, _SYMBOL_RULES)
    text = _digits(text)
    text = _apply(text, _PROVIDER_RULES)
    text = _apply(text, _TIGHTEN_RULES)

    if EMAIL_RE.fullmatch(text) is None:
        logger.debug("normalize_spoken_email: no email shape (length=%d)", len(raw))
        return None
    return text
