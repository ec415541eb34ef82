import re
from typing import List

import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import account_recovery.domain.entities  # registers tables on SQLModel.metadata
from account_recovery.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from account_recovery.app.services.email_sender import EmailMessage, IEmailSender
from account_recovery.depends import get_email_sender, get_unit_of_work

TOKEN_PATTERN = re.compile(r"[?&]token=([0-9a-f]{64})")


class RecordingEmailSender(IEmailSender):
    """Captures outbound messages so tests can follow the emailed link"""

    def __init__(self):
        self.messages: List[EmailMessage] = []

    async def deliver(self, message: EmailMessage) -> bool:
        self.messages.append(message)
        return True

    def tokens(self) -> List[str]:
        return [TOKEN_PATTERN.search(m.text_body).group(1) for m in self.messages]


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
def outbox():
    return RecordingEmailSender()


@pytest_asyncio.fixture
async def client(db_session, outbox):
    from httpx import ASGITransport
    from account_recovery.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_email_sender] = lambda: outbox

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
