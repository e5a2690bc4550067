# marketplace_api/db.py
import logging

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from . import config
from .orm import Base

log = logging.getLogger("uvicorn.error")

_engine = None
_SessionLocal = None


def _ensure_engine():
    global _engine, _SessionLocal
    if _engine is None:
        _engine = create_async_engine(config.DATABASE_URL, echo=config.SQL_ECHO)
        _SessionLocal = async_sessionmaker(_engine, expire_on_commit=False)


def get_engine() -> AsyncEngine:
    _ensure_engine()
    return _engine


async def get_session() -> AsyncSession:
    _ensure_engine()
    async with _SessionLocal() as session:
        yield session


async def init_models(engine: AsyncEngine | None = None, drop: bool = False) -> None:
    """Create the profiles/contracts/jobs tables, optionally dropping them first."""
    engine = engine or get_engine()
    async with engine.begin() as conn:
        if drop:
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    log.info(f"Tables ready on {engine.url.render_as_string(hide_password=True)}")


async def dispose_engine() -> None:
    global _engine, _SessionLocal
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _SessionLocal = None
