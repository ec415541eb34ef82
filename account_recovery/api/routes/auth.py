from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from account_recovery.api.error import ClientError, ServerError
from account_recovery.app.services.recovery_mailer import RecoveryMailer
from account_recovery.app.services.unit_of_work import UnitOfWork
from account_recovery.app.use_cases.auth import (
    RequestPasswordResetUseCase,
    VerifyResetTokenUseCase,
    ConfirmPasswordResetUseCase,
    VerifyEmailUseCase,
    ResendVerificationUseCase,
    RequestPasswordResetResponse,
    VerifyResetTokenResponse,
    ConfirmPasswordResetResponse,
    VerifyEmailResponse,
    ResendVerificationResponse,
)
from account_recovery.depends import get_recovery_mailer, get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])


class RequestPasswordResetRequest(BaseModel):
    """
    Request password reset HTTP request payload

    The address is not format-validated here: unknown or malformed
    addresses must get the same response as registered ones.
    """

    email: str = Field(..., max_length=255, description="User email address")


@router.post(
    "/request-password-reset",
    status_code=status.HTTP_200_OK,
    response_model=RequestPasswordResetResponse,
)
async def request_password_reset(
    request: RequestPasswordResetRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    mailer: RecoveryMailer = Depends(get_recovery_mailer),
):
    """
    Request Password Reset

    Issues a reset token (valid 1 hour) and emails the reset link.

    Security:
        - No email enumeration (same response for every email)
        - Token never appears in the response

    Returns:
        - 200 OK: Always returns success (no enumeration)
        - 500 Internal Server Error: Server error
    """
    use_case = RequestPasswordResetUseCase(uow, mailer)
    result = await use_case.execute(request.email)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


class TokenRequest(BaseModel):
    """Token-only HTTP request payload"""

    token: str = Field(..., description="Token from the emailed link")


@router.post(
    "/verify-reset-token",
    status_code=status.HTTP_200_OK,
    response_model=VerifyResetTokenResponse,
    response_model_exclude_none=True,
)
async def verify_reset_token(request: TokenRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Verify Reset Token

    Read-only check used before showing the new-password form.
    Does not consume the token.

    Returns:
        - 200 OK: {valid: true, user_id} or {valid: false, reason, error}
        - 500 Internal Server Error: Server error
    """
    use_case = VerifyResetTokenUseCase(uow)
    result = await use_case.execute(request.token)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


class ConfirmPasswordResetRequest(BaseModel):
    """
    Confirm password reset HTTP request payload

    Password policy is enforced by the use case so it reports WEAK_PASSWORD.
    """

    token: str = Field(..., description="Password reset token from email")
    new_password: str = Field(..., description="New password (8 characters to 72 bytes)")


@router.post(
    "/confirm-password-reset",
    status_code=status.HTTP_200_OK,
    response_model=ConfirmPasswordResetResponse,
)
async def confirm_password_reset(
    request: ConfirmPasswordResetRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Confirm Password Reset

    Validates reset token and updates user password.
    Invalidates all existing sessions of the user.

    Raises:
        - 400 Bad Request: Invalid/used token or weak password
        - 410 Gone: Expired token
        - 500 Internal Server Error: Server error (nothing was changed)
    """
    use_case = ConfirmPasswordResetUseCase(uow)
    result = await use_case.execute(request.token, request.new_password)

    if result.is_err():
        error = result.error
        if error.code in ("INVALID_TOKEN", "WEAK_PASSWORD"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "TOKEN_EXPIRED":
            raise ClientError(error, status_code=status.HTTP_410_GONE)
        raise ServerError(error)

    return result.value


@router.post("/verify-email", status_code=status.HTTP_200_OK, response_model=VerifyEmailResponse)
async def verify_email(request: TokenRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Email Verification

    Marks the email as verified and spends the token.

    Raises:
        - 400 Bad Request: Invalid or used token
        - 410 Gone: Expired token
        - 500 Internal Server Error: Server error (nothing was changed)
    """
    use_case = VerifyEmailUseCase(uow)
    result = await use_case.execute(request.token)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_TOKEN":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "TOKEN_EXPIRED":
            raise ClientError(error, status_code=status.HTTP_410_GONE)
        raise ServerError(error)

    return result.value


class ResendVerificationRequest(BaseModel):
    """Resend verification email HTTP request payload"""

    email: str = Field(..., max_length=255, description="User email address")


@router.post(
    "/resend-verification",
    status_code=status.HTTP_200_OK,
    response_model=ResendVerificationResponse,
)
async def resend_verification(
    request: ResendVerificationRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    mailer: RecoveryMailer = Depends(get_recovery_mailer),
):
    """
    Resend Verification Email

    Invalidates old verification tokens and emails a new link (valid 24 hours).

    Security:
        - No email enumeration (same response for unknown, verified and unverified emails)

    Returns:
        - 200 OK: Always returns success (no enumeration)
        - 500 Internal Server Error: Server error
    """
    use_case = ResendVerificationUseCase(uow, mailer)
    result = await use_case.execute(request.email)

    if result.is_err():
        raise ServerError(result.error)

    return result.value
