"""
Use Case: Purge Expired Recovery Tokens

Optional housekeeping. Expired and used tokens are already inert, so
purging only reclaims space; correctness never depends on it.
"""

import logging
from datetime import datetime, timedelta
from typing import Callable

from pydantic import BaseModel

from account_recovery.core.result import Error, Result, Return
from account_recovery.app.services.unit_of_work import StoreError, UnitOfWork
from account_recovery.domain.base import utcnow
from account_recovery.domain.entities import AuditEvent

logger = logging.getLogger(__name__)


class PurgeExpiredTokensResponse(BaseModel):
    """Response DTO for PurgeExpiredTokensUseCase"""

    status: str
    cutoff: datetime
    reset_tokens_purged: int
    verification_tokens_purged: int


class PurgeExpiredTokensUseCase:
    """
    Delete recovery tokens whose expiry lies further back than the retention window.

    Business Logic:
    1. Compute cutoff = now - retention
    2. Delete reset and verification tokens that expired before the cutoff
    3. Record an audit event with the counts
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(self, retention: timedelta) -> Result[PurgeExpiredTokensResponse]:
        """
        Execute purge use case.

        Errors:
            - INVALID_RETENTION: Negative retention window
            - TRANSACTION_FAILED: Store failure, nothing was deleted
        """
        if retention < timedelta(0):
            return Return.err(Error("INVALID_RETENTION", "Retention window cannot be negative"))

        cutoff = self.clock() - retention
        try:
            async with self.uow:
                reset_purged = await self.uow.reset_tokens.delete_expired_before(cutoff)
                verification_purged = await self.uow.verification_tokens.delete_expired_before(
                    cutoff
                )

                await self.uow.audit_events.create(
                    AuditEvent(
                        action="recovery_tokens_purged",
                        event_metadata={
                            "cutoff": cutoff.isoformat(),
                            "reset_tokens_purged": reset_purged,
                            "verification_tokens_purged": verification_purged,
                        },
                    )
                )

                await self.uow.commit()
        except StoreError as e:
            logger.error(f"Token purge rolled back: {e}")
            return Return.err(Error("TRANSACTION_FAILED", "Tokens could not be purged"))

        logger.info(
            f"Purged {reset_purged} reset and {verification_purged} verification tokens "
            f"expired before {cutoff.isoformat()}"
        )
        return Return.ok(
            PurgeExpiredTokensResponse(
                status="purged",
                cutoff=cutoff,
                reset_tokens_purged=reset_purged,
                verification_tokens_purged=verification_purged,
            )
        )
