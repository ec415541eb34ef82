"""
Unit tests for CheckEmailVerifiedUseCase
"""
from uuid import uuid4

import pytest

from account_recovery.app.use_cases.users import CheckEmailVerifiedUseCase
from account_recovery.domain.entities import User


@pytest.mark.asyncio
@pytest.mark.parametrize("verified", [True, False])
async def test_returns_flag(mock_uow, verified):
    user_id = uuid4()
    mock_uow.users.get_by_id.return_value = User(
        id=user_id, email="user@example.com", password_hash="x", email_verified=verified
    )

    result = await CheckEmailVerifiedUseCase(mock_uow).execute(user_id)

    assert result.is_ok()
    assert result.value.email_verified is verified
    assert result.value.user_id == str(user_id)
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_unknown_user_is_not_verified(mock_uow):
    mock_uow.users.get_by_id.return_value = None

    result = await CheckEmailVerifiedUseCase(mock_uow).execute(uuid4())

    assert result.is_ok()
    assert result.value.email_verified is False
