from uuid import UUID
from fastapi import APIRouter, Depends, status

from account_recovery.api.error import ServerError
from account_recovery.app.services.unit_of_work import UnitOfWork
from account_recovery.app.use_cases.users import CheckEmailVerifiedUseCase, EmailVerifiedResponse
from account_recovery.depends import get_current_user, get_unit_of_work

router = APIRouter(tags=["User"])


@router.get(
    "/me/email-verified",
    status_code=status.HTTP_200_OK,
    response_model=EmailVerifiedResponse,
)
async def get_email_verified(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Email Verification Status

    Returns whether the caller's email is verified, for access-control checks.

    Raises:
        - 401 Unauthorized: Invalid or expired JWT
        - 500 Internal Server Error: Server error
    """
    use_case = CheckEmailVerifiedUseCase(uow)
    result = await use_case.execute(UUID(current_user["user_id"]))

    if result.is_err():
        raise ServerError(result.error)

    return result.value
