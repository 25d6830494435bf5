"""
Shared fixtures: a throwaway SQLite database per test.

Seeding and assertions go through a synchronous engine; the code under test
talks to the same file through aiosqlite. NullPool keeps every async
connection local to the event loop that opened it.
"""
from datetime import datetime
from decimal import Decimal

import pytest
import pytest_asyncio
from sqlalchemy import create_engine, select
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import NullPool

from domain.entities import Transaction, TransactionType
from infrastructure.db.database import make_session_factory
from infrastructure.db.models import Base, TransactionModel, UserModel


DEPOSIT_TIME = datetime(2023, 3, 14, 9, 26, 53).astimezone()


@pytest.fixture
def deposit_time():
    return DEPOSIT_TIME


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "bank.db"


@pytest.fixture
def sync_engine(db_path):
    engine = create_engine(f"sqlite:///{db_path}")
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def seeded(sync_engine):
    """Users 1 (500.00) and 2 (10.00) with one deposit each."""
    with Session(sync_engine) as session:
        session.add_all([
            UserModel(id=1, balance=Decimal("500.00")),
            UserModel(id=2, balance=Decimal("10.00")),
        ])
        session.add_all([
            TransactionModel.from_domain(Transaction(
                user_id=1, type=TransactionType.DEPOSIT, amount=Decimal("111.00"), time=DEPOSIT_TIME,
            )),
            TransactionModel.from_domain(Transaction(
                user_id=2, type=TransactionType.DEPOSIT, amount=Decimal("10.00"), time=DEPOSIT_TIME,
            )),
        ])
        session.commit()
    return sync_engine


@pytest.fixture
def async_database_url(db_path):
    return f"sqlite+aiosqlite:///{db_path}"


@pytest_asyncio.fixture
async def async_engine(async_database_url, sync_engine):
    engine = create_async_engine(async_database_url, poolclass=NullPool)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(async_engine):
    async with make_session_factory(async_engine)() as session:
        yield session


@pytest.fixture
def read_balance(sync_engine):
    def _read(user_id: int) -> Decimal:
        with Session(sync_engine) as session:
            return session.scalar(select(UserModel.balance).where(UserModel.id == user_id))
    return _read


@pytest.fixture
def read_transactions(sync_engine):
    def _read(user_id: int) -> list[Transaction]:
        with Session(sync_engine) as session:
            stmt = select(TransactionModel).where(TransactionModel.user_id == user_id).order_by(TransactionModel.id)
            return [tm.to_domain() for tm in session.scalars(stmt)]
    return _read


@pytest.fixture
def client(async_database_url, sync_engine):
    """TestClient whose request sessions point at the temporary database."""
    from fastapi.testclient import TestClient
    from app.main import app
    from infrastructure.db.database import get_db_session

    engine = create_async_engine(async_database_url, poolclass=NullPool)
    session_factory = make_session_factory(engine)

    async def override_get_db_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    yield TestClient(app)
    app.dependency_overrides.clear()
