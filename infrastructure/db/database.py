"""
Async SQLAlchemy engine and per-request sessions for the bank database.
"""
import os
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine, AsyncSession, async_sessionmaker

# Models must be registered on Base.metadata before create_schema runs
from infrastructure.db.models import Base, TransactionModel, UserModel  # noqa: F401


def database_url() -> str:
    """DATABASE_URL when set, otherwise a PostgreSQL URL assembled from the DB_* variables."""
    explicit = os.getenv("DATABASE_URL")
    if explicit:
        return explicit
    user = os.getenv("DB_USER", "postgres")
    password = os.getenv("DB_PASSWORD", "postgres")
    host = os.getenv("DB_HOST", "localhost")
    port = os.getenv("DB_PORT", "5432")
    name = os.getenv("DB_NAME", "bank")
    return f"postgresql+asyncpg://{user}:{password}@{host}:{port}/{name}"


def make_session_factory(bind: AsyncEngine) -> async_sessionmaker:
    # Entities are copied out of the models, so nothing needs refreshing after commit
    return async_sessionmaker(bind, class_=AsyncSession, expire_on_commit=False, autoflush=False)


engine = create_async_engine(
    database_url(),
    echo=os.getenv("DB_ECHO", "false").lower() == "true",
    pool_pre_ping=True,
)
AsyncSessionLocal = make_session_factory(engine)


async def create_schema(bind: AsyncEngine = engine) -> None:
    """Create the transactions and users tables if they do not exist."""
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_db_session() -> AsyncSession:
    """
    FastAPI dependency yielding one session per request.
    ApplicationService.close() releases it; the context manager is the backstop.
    """
    async with AsyncSessionLocal() as session:
        yield session
