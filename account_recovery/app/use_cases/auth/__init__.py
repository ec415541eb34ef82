"""
Account Recovery Use Cases

Password reset and email verification business logic.
"""

from .request_password_reset_use_case import RequestPasswordResetUseCase, RESET_REQUESTED
from .verify_reset_token_use_case import VerifyResetTokenUseCase
from .confirm_password_reset_use_case import ConfirmPasswordResetUseCase
from .send_verification_email_use_case import SendVerificationEmailUseCase
from .verify_email_use_case import VerifyEmailUseCase
from .resend_verification_use_case import ResendVerificationUseCase, VERIFICATION_SENT
from .dtos import (
    RequestPasswordResetResponse,
    VerifyResetTokenResponse,
    ConfirmPasswordResetResponse,
    SendVerificationEmailResponse,
    VerifyEmailResponse,
    ResendVerificationResponse,
)

__all__ = [
    # Use Cases
    "RequestPasswordResetUseCase",
    "VerifyResetTokenUseCase",
    "ConfirmPasswordResetUseCase",
    "SendVerificationEmailUseCase",
    "VerifyEmailUseCase",
    "ResendVerificationUseCase",
    # Generic responses
    "RESET_REQUESTED",
    "VERIFICATION_SENT",
    # DTOs - Responses
    "RequestPasswordResetResponse",
    "VerifyResetTokenResponse",
    "ConfirmPasswordResetResponse",
    "SendVerificationEmailResponse",
    "VerifyEmailResponse",
    "ResendVerificationResponse",
]
