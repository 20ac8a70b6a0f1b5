import logging
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool, StaticPool

logger = logging.getLogger(__name__)


def is_postgres_url(url: str) -> bool:
    # Note: Supabase/some providers use postgres:// while SQLAlchemy prefers postgresql://
    return url.startswith("postgresql") or url.startswith("postgres://")


def normalize_database_url(url: str) -> str:
    """Rewrite PostgreSQL URLs to the psycopg (psycopg3) async driver"""
    if not is_postgres_url(url):
        return url
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+psycopg://", 1)
    if "+asyncpg" in url:
        return url.replace("+asyncpg", "+psycopg")
    if url.startswith("postgresql://") and "+psycopg" not in url:
        return url.replace("postgresql://", "postgresql+psycopg://", 1)
    return url


class Base(DeclarativeBase):
    """Base class for all models"""
    pass


class Database:
    """Async engine and session factory for one database URL"""

    def __init__(self, url: str, echo: bool = False):
        self.url = normalize_database_url(url)
        is_postgres = is_postgres_url(self.url)

        engine_kwargs = {"echo": echo}
        if is_postgres:
            # Let pgbouncer handle pooling; psycopg3 copes with transaction mode
            engine_kwargs.update({
                "poolclass": NullPool,
                "connect_args": {"prepare_threshold": None},
            })
        elif ":memory:" in self.url:
            # One shared connection, otherwise every session sees an empty database
            engine_kwargs.update({
                "poolclass": StaticPool,
                "connect_args": {"check_same_thread": False},
            })

        logger.info("Database config: is_postgres=%s, poolclass=%s",
                    is_postgres, engine_kwargs.get("poolclass", "default"))

        self.engine = create_async_engine(self.url, **engine_kwargs)
        self.session_maker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def create_all(self):
        """Initialize database tables"""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def drop_all(self):
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def dispose(self):
        await self.engine.dispose()
