"""FastAPI dependency injection — settings-bound security checks."""
from __future__ import annotations

import logging

from fastapi import Depends, Header, HTTPException, status

from spoken_normalizer.core.security import TokenVerifier
from spoken_normalizer.core.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def get_token_verifier(settings: Settings = Depends(get_settings)) -> TokenVerifier:
    """Return a verifier for the configured NORMALIZER_TOKEN (may be unset)."""
    return TokenVerifier(expected_token=settings.normalizer_token)


def require_token(
    authorization: str | None = Header(default=None),
    verifier: TokenVerifier = Depends(get_token_verifier),
) -> None:
    """Reject the request with 401 unless the bearer token matches."""
    if not verifier.verify(authorization):
        logger.warning("require_token: rejected request with invalid bearer token")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
