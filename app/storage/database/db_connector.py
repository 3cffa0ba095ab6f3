from collections.abc import AsyncGenerator
from typing import Any, Dict
from sqlalchemy.engine.url import make_url, URL
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool
from app.core.settings import settings


def build_url(raw: str) -> URL:
    """
    Normaliza DATABASE_URL.

    Postgres (postgres://, postgresql://, postgresql+psycopg://...) se reconstruye
    como postgresql+asyncpg sin query string, para que sslmode/channel_binding no
    lleguen a asyncpg. Cualquier otro driver async (sqlite+aiosqlite) se usa tal cual.
    """
    u = make_url(raw)
    if not u.drivername.startswith("postgres"):
        return u
    return URL.create(
        drivername="postgresql+asyncpg",
        username=u.username,
        password=u.password,
        host=u.host,
        port=u.port,
        database=u.database,
    )


def build_engine(url: URL) -> AsyncEngine:
    kwargs: Dict[str, Any] = {
        "echo": bool(getattr(settings, "DEBUG", False)),
    }
    if url.drivername == "postgresql+asyncpg":
        kwargs.update(
            poolclass=NullPool,
            pool_pre_ping=True,
            execution_options={"isolation_level": "READ COMMITTED"},
            connect_args={
                "ssl": settings.DB_SSL,
                "statement_cache_size": 0,   # evita prepared stmts con PgBouncer
            },
        )
    return create_async_engine(url.render_as_string(hide_password=False), **kwargs)


engine = build_engine(build_url(settings.DATABASE_URL.get_secret_value()))

async_session = async_sessionmaker(bind=engine, expire_on_commit=False, autoflush=False, class_=AsyncSession)

async def get_db() -> AsyncGenerator[AsyncSession, None]:
    session: AsyncSession = async_session()
    try:
        yield session
    finally:
        await session.close()

async def dispose_engine() -> None:
    await engine.dispose()
