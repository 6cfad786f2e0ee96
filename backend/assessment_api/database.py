"""
Database connection and session management.

Key concepts:
- We use SQLAlchemy 2.0's async API (aiosqlite by default, asyncpg works too)
- get_db() is a "dependency" that FastAPI injects into route handlers —
  it provides a session and ensures cleanup after each request
- The default URL is an in-memory SQLite database. In-memory SQLite lives
  inside a single connection, so that case uses a StaticPool to share it.
"""

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from sqlalchemy.pool import StaticPool

from assessment_api.config import settings


def _engine_options(url: str) -> dict:
    """Pool options that suit the configured backend."""
    if url.startswith("sqlite"):
        return {
            "poolclass": StaticPool,
            "connect_args": {"check_same_thread": False},
        }
    # - pool_size=5 keeps 5 connections ready (good for dev, increase for prod)
    return {"pool_size": 5, "max_overflow": 10}


engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DB_ECHO,
    **_engine_options(settings.DATABASE_URL),
)

# Session factory — creates new database sessions
# - expire_on_commit=False means objects stay usable after commit
#   (without this, accessing an attribute after commit triggers a lazy load,
#    which fails with async)
AsyncSessionLocal = sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass


async def get_db():
    """FastAPI dependency that provides a database session.

    Usage in a route:
        @router.get("/items")
        async def get_items(db: AsyncSession = Depends(get_db)):
            ...

    The session is automatically closed when the request finishes,
    even if an error occurs.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


async def init_db():
    """Create all tables defined by our models.

    Called once at startup. Users and the report ledger are append-only,
    so there is no migration story beyond create_all.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
