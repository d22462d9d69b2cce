"""POST /api/normalize — spoken email and time phrase normalization.

Any other method on the path is answered with 405 by the router.
When ``NORMALIZER_TOKEN`` is set, ``Authorization: Bearer <token>`` is
required.
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from spoken_normalizer.api.deps import require_token
from spoken_normalizer.core.settings import get_settings
from spoken_normalizer.normalization.pipeline import normalize_contact

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["normalize"])


# ---------------------------------------------------------------------------
# Request / response models
# ---------------------------------------------------------------------------

class NormalizeBody(BaseModel):
    raw_email: str | None = None
    time_phrase: str | None = None
    fallback_tz: str | None = Field(default=None, description="IANA zone, e.g. America/New_York")


class NormalizeResponse(BaseModel):
    normalized_email: str | None
    start_iso: str | None
    time_zone: str
    error: str | None


@router.post(
    "/normalize",
    response_model=NormalizeResponse,
    summary="Normalize a spoken email address and time phrase",
    dependencies=[Depends(require_token)],
)
def normalize(body: NormalizeBody | None = None) -> NormalizeResponse:
    body = body or NormalizeBody()
    fallback_tz = body.fallback_tz or get_settings().default_time_zone

    result = normalize_contact(body.raw_email, body.time_phrase, fallback_tz)
    return NormalizeResponse(**result.to_dict())
