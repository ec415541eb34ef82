from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from account_recovery.adapter.services.logging_email_sender import LoggingEmailSender
from account_recovery.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from account_recovery.api.utils.jwt import verify_jwt
from account_recovery.app.services.email_sender import IEmailSender
from account_recovery.app.services.recovery_mailer import RecoveryMailer

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer()


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_email_sender() -> IEmailSender:
    return LoggingEmailSender(ApplicationConfig.EMAIL_FROM, ApplicationConfig.EMAIL_FROM_NAME)


def get_recovery_mailer(sender: IEmailSender = Depends(get_email_sender)) -> RecoveryMailer:
    return RecoveryMailer(sender, ApplicationConfig.FRONTEND_URL)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> dict:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Decoded JWT payload containing user_id

    Raises:
        HTTPException: 401 if token is invalid, expired or its user_id is not a UUID
    """
    token = credentials.credentials
    payload = verify_jwt(token)

    if payload is None or "user_id" not in payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    try:
        UUID(str(payload["user_id"]))
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token subject",
        )

    return payload
