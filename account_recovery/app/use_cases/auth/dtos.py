"""
Account Recovery Use Case DTOs (Data Transfer Objects)

All Response classes for the password reset and email verification flows.
Provides type safety and clear contracts between layers.
"""

from typing import Optional
from pydantic import BaseModel


# ============================================================================
# Password Reset
# ============================================================================


class RequestPasswordResetResponse(BaseModel):
    """Response for request password reset use case (identical for every email)"""

    status: str
    message: str


class VerifyResetTokenResponse(BaseModel):
    """Response for the read-only reset token probe"""

    valid: bool
    user_id: Optional[str] = None
    reason: Optional[str] = None
    error: Optional[str] = None


class ConfirmPasswordResetResponse(BaseModel):
    """Response for confirm password reset use case"""

    status: str
    message: str


# ============================================================================
# Email Verification
# ============================================================================


class SendVerificationEmailResponse(BaseModel):
    """Response for send verification email use case"""

    success: bool
    message: str


class VerifyEmailResponse(BaseModel):
    """Response for email verification use case"""

    status: str
    message: str
    user_id: str


class ResendVerificationResponse(BaseModel):
    """Response for resend verification email use case (identical for every email)"""

    status: str
    message: str
