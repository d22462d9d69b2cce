from __future__ import annotations

import hmac
from dataclasses import dataclass

BEARER_PREFIX = "Bearer "


@dataclass(slots=True)
class TokenVerifier:
    expected_token: str | None = None

    @property
    def enabled(self) -> bool:
        return bool(self.expected_token)

    def verify(self, authorization: str | None) -> bool:
        """Return True when no token is configured or *authorization* carries it."""
        if not self.enabled:
            return True
        expected = f"{BEARER_PREFIX}{self.expected_token}".encode("utf-8")
        presented = (authorization or "").encode("utf-8")
        return hmac.compare_digest(presented, expected)
