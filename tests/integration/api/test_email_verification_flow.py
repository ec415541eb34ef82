"""
Integration tests for the email verification flow

resend-verification -> verify-email against a real SQLite store.
"""
from datetime import timedelta

import pytest
from httpx import AsyncClient
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from account_recovery.adapter.repositories.user_repository import UserRepository
from account_recovery.app.services.token_generator import hash_token
from account_recovery.domain.base import utcnow
from account_recovery.domain.entities import RecoveryToken, TokenPurpose, User

GENERIC_RESEND = {
    "status": "sent",
    "message": "If the email exists, a verification link has been sent",
}


async def create_user(
    db_session: AsyncSession, email: str = "new@example.com", verified: bool = False
) -> User:
    user = User(
        email=email,
        password_hash="$2b$04$placeholderplaceholderplaceholderplaceholderpla",
        display_name="New User",
        email_verified=verified,
    )
    db_session.add(user)
    await db_session.commit()
    return user


async def create_verification_token(
    db_session: AsyncSession, user: User, plain_token: str, expires_in: timedelta
) -> RecoveryToken:
    token = RecoveryToken(
        user_id=user.id,
        purpose=TokenPurpose.email_verification,
        token_hash=hash_token(plain_token),
        expires_at=utcnow() + expires_in,
    )
    db_session.add(token)
    await db_session.commit()
    return token


@pytest.mark.asyncio
async def test_resend_then_verify(client: AsyncClient, db_session: AsyncSession, outbox):
    """
    Given an unverified user
    When they request a new verification email and open the link
    Then their email is verified and the token is spent
    """
    user = await create_user(db_session)

    response = await client.post("/auth/resend-verification", json={"email": user.email})
    assert response.status_code == 200
    assert response.json() == GENERIC_RESEND

    [plain_token] = outbox.tokens()
    assert "/verify-email?token=" in outbox.messages[0].text_body

    response = await client.post("/auth/verify-email", json={"token": plain_token})
    assert response.status_code == 200
    assert response.json() == {
        "status": "verified",
        "message": "Email successfully verified",
        "user_id": str(user.id),
    }

    await db_session.refresh(user)
    assert user.email_verified is True
    assert user.email_verified_at is not None

    # Single use
    response = await client.post("/auth/verify-email", json={"token": plain_token})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_TOKEN"


@pytest.mark.asyncio
async def test_resend_is_indistinguishable(client: AsyncClient, db_session: AsyncSession, outbox):
    """Unverified, verified and unknown emails get byte-identical responses"""
    await create_user(db_session, email="pending@example.com")
    await create_user(db_session, email="done@example.com", verified=True)

    responses = [
        await client.post("/auth/resend-verification", json={"email": email})
        for email in ("pending@example.com", "done@example.com", "ghost@nowhere.com")
    ]

    assert {r.status_code for r in responses} == {200}
    assert len({r.content for r in responses}) == 1

    # Only the unverified user got a token and an email
    result = await db_session.exec(select(RecoveryToken))
    assert len(result.all()) == 1
    assert [m.recipient for m in outbox.messages] == ["pending@example.com"]


@pytest.mark.asyncio
async def test_resend_invalidates_previous_token(
    client: AsyncClient, db_session: AsyncSession, outbox
):
    user = await create_user(db_session)

    for _ in range(2):
        await client.post("/auth/resend-verification", json={"email": user.email})

    old_token, new_token = outbox.tokens()

    response = await client.post("/auth/verify-email", json={"token": old_token})
    assert response.status_code == 400

    response = await client.post("/auth/verify-email", json={"token": new_token})
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_expired_token_rejected(client: AsyncClient, db_session: AsyncSession):
    user = await create_user(db_session)
    await create_verification_token(db_session, user, "f" * 64, timedelta(seconds=-1))

    response = await client.post("/auth/verify-email", json={"token": "f" * 64})

    assert response.status_code == 410
    assert response.json()["error"]["code"] == "TOKEN_EXPIRED"
    await db_session.refresh(user)
    assert user.email_verified is False


@pytest.mark.asyncio
async def test_reset_token_cannot_verify_email(client: AsyncClient, db_session: AsyncSession):
    """Tokens are scoped to their purpose"""
    user = await create_user(db_session)
    token = RecoveryToken(
        user_id=user.id,
        purpose=TokenPurpose.password_reset,
        token_hash=hash_token("0" * 64),
        expires_at=utcnow() + timedelta(minutes=30),
    )
    db_session.add(token)
    await db_session.commit()

    response = await client.post("/auth/verify-email", json={"token": "0" * 64})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_TOKEN"


@pytest.mark.asyncio
async def test_store_failure_changes_nothing(
    client: AsyncClient, db_session: AsyncSession, monkeypatch
):
    """Fault injection: flag and token are never partially applied"""
    from sqlalchemy.exc import IntegrityError

    user = await create_user(db_session)
    token = await create_verification_token(db_session, user, "1" * 64, timedelta(hours=1))

    async def failing_update(self, user):
        raise IntegrityError("UPDATE users", {}, Exception("constraint failed"))

    monkeypatch.setattr(UserRepository, "update", failing_update)

    response = await client.post("/auth/verify-email", json={"token": "1" * 64})

    assert response.status_code == 500
    assert response.json()["error"]["code"] == "TRANSACTION_FAILED"

    await db_session.refresh(user)
    await db_session.refresh(token)
    assert user.email_verified is False
    assert token.used is False


@pytest.mark.asyncio
async def test_overlong_token_reads_as_invalid(client: AsyncClient):
    response = await client.post("/auth/verify-email", json={"token": "x" * 500})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_TOKEN"


@pytest.mark.asyncio
async def test_resend_survives_mail_transport_failure(
    client: AsyncClient, db_session: AsyncSession, outbox, monkeypatch
):
    await create_user(db_session, email="pending@example.com")

    async def crashing_deliver(message):
        raise ConnectionError("smtp down")

    monkeypatch.setattr(outbox, "deliver", crashing_deliver)

    response = await client.post(
        "/auth/resend-verification", json={"email": "pending@example.com"}
    )

    assert response.status_code == 200
    assert response.json() == GENERIC_RESEND
