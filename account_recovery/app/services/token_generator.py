"""
Token Generator

Mints unguessable recovery tokens and their expiry timestamps.
No I/O and no shared state; entropy source and clock are injectable.
"""

import hashlib
import secrets
from datetime import datetime, timedelta
from typing import Callable, NamedTuple

from account_recovery.domain.base import utcnow
from account_recovery.domain.entities import TokenPurpose

TOKEN_BYTES = 32  # 256 bits, rendered as 64 hex characters

TOKEN_TTL = {
    TokenPurpose.password_reset: timedelta(hours=1),
    TokenPurpose.email_verification: timedelta(hours=24),
}


class GeneratedToken(NamedTuple):
    token: str
    expires_at: datetime


def hash_token(token: str) -> str:
    """SHA-256 hex digest stored in place of the plain token"""
    return hashlib.sha256(token.encode()).hexdigest()


class TokenGenerator:
    def __init__(
        self,
        entropy: Callable[[int], bytes] = secrets.token_bytes,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.entropy = entropy
        self.clock = clock

    def generate(self, purpose: TokenPurpose) -> GeneratedToken:
        """
        Generate a token for the given purpose.

        Returns:
            GeneratedToken with a 64-char hex token and its expiry
            (1 hour for password reset, 24 hours for email verification)
        """
        raw = self.entropy(TOKEN_BYTES)
        if len(raw) < TOKEN_BYTES:
            raise ValueError(f"Entropy source returned {len(raw)} bytes, need {TOKEN_BYTES}")
        return GeneratedToken(
            token=raw[:TOKEN_BYTES].hex(),
            expires_at=self.clock() + TOKEN_TTL[purpose],
        )
