"""
Admin API Routes - System Administration Endpoints

Authentication is via Admin API Key, not user JWTs.
"""

from datetime import timedelta
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from config import ApplicationConfig
from account_recovery.api.error import ClientError, ServerError
from account_recovery.api.utils.admin_auth import verify_admin_api_key
from account_recovery.app.services.unit_of_work import UnitOfWork
from account_recovery.app.use_cases.admin import (
    PurgeExpiredTokensResponse,
    PurgeExpiredTokensUseCase,
)
from account_recovery.depends import get_unit_of_work

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post(
    "/recovery-tokens/purge",
    status_code=status.HTTP_200_OK,
    response_model=PurgeExpiredTokensResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def purge_recovery_tokens(
    retention_days: Optional[int] = Query(None, description="Keep tokens expired within this many days"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Purge Expired Recovery Tokens

    Housekeeping for reset and verification tokens. Not required for correctness.

    Requires: X-Admin-API-Key header

    Raises:
        - 400 Bad Request: INVALID_RETENTION
        - 401 Unauthorized: Missing or invalid admin API key
        - 500 Internal Server Error: Server error
    """
    if retention_days is None:
        retention_days = ApplicationConfig.TOKEN_RETENTION_DAYS

    use_case = PurgeExpiredTokensUseCase(uow)
    result = await use_case.execute(timedelta(days=retention_days))

    if result.is_err():
        error = result.error
        if error.code == "INVALID_RETENTION":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value
