import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all required repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    # Mock repositories
    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock()
    uow.users.get_unverified_by_email = AsyncMock()
    uow.users.get_by_id = AsyncMock()
    uow.users.update = AsyncMock(side_effect=lambda user: user)

    uow.sessions = MagicMock()
    uow.sessions.invalidate_all_by_user_id = AsyncMock(return_value=0)

    for name in ("reset_tokens", "verification_tokens"):
        tokens = MagicMock()
        tokens.create = AsyncMock(side_effect=lambda token: token)
        tokens.get_unused_by_token_hash = AsyncMock()
        tokens.claim = AsyncMock(return_value=True)
        tokens.invalidate_unused_by_user_id = AsyncMock(return_value=0)
        tokens.delete_expired_before = AsyncMock(return_value=0)
        setattr(uow, name, tokens)

    uow.audit_events = MagicMock()
    uow.audit_events.create = AsyncMock(side_effect=lambda event: event)

    return uow


@pytest.fixture
def mock_mailer():
    mailer = MagicMock()
    mailer.send_password_reset_email = AsyncMock(return_value=True)
    mailer.send_verification_email = AsyncMock(return_value=True)
    return mailer
