"""Admin use cases for system administration operations."""

from .purge_expired_tokens_use_case import (
    PurgeExpiredTokensUseCase,
    PurgeExpiredTokensResponse,
)

__all__ = [
    "PurgeExpiredTokensUseCase",
    "PurgeExpiredTokensResponse",
]
