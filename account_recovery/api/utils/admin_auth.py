"""
Operator API Key Authentication

Guards housekeeping endpoints such as the recovery token purge.
These are called by operators and scheduled jobs, never by end users.
"""

import hmac

from fastapi import Header, status
from account_recovery.core.result import Error
from account_recovery.api.error import ClientError
from config import ApplicationConfig


async def verify_admin_api_key(x_admin_api_key: str = Header(None)) -> bool:
    """
    Check the X-Admin-API-Key header against ADMIN_API_KEY.

    Raises:
        ClientError: 401 UNAUTHORIZED if the header is missing,
            401 INVALID_API_KEY if it does not match
    """
    if not x_admin_api_key:
        raise ClientError(
            Error("UNAUTHORIZED", "Admin API key required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    if not hmac.compare_digest(
        x_admin_api_key.encode(), ApplicationConfig.ADMIN_API_KEY.encode()
    ):
        raise ClientError(
            Error("INVALID_API_KEY", "Invalid admin API key"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return True
