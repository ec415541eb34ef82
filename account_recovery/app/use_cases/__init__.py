"""
Use Cases

Organized into domain folders:
- auth/: Password reset and email verification flows
- users/: Read-only user checks
- admin/: Housekeeping
"""

from .auth import (
    RequestPasswordResetUseCase,
    VerifyResetTokenUseCase,
    ConfirmPasswordResetUseCase,
    SendVerificationEmailUseCase,
    VerifyEmailUseCase,
    ResendVerificationUseCase,
)
from .users import CheckEmailVerifiedUseCase
from .admin import PurgeExpiredTokensUseCase

__all__ = [
    # Auth
    "RequestPasswordResetUseCase",
    "VerifyResetTokenUseCase",
    "ConfirmPasswordResetUseCase",
    "SendVerificationEmailUseCase",
    "VerifyEmailUseCase",
    "ResendVerificationUseCase",
    # Users
    "CheckEmailVerifiedUseCase",
    # Admin
    "PurgeExpiredTokensUseCase",
]
