# marketplace_api/routers/health.py
from fastapi import APIRouter, Depends
from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncSession

from ..db import get_session
from ..orm import Base

router = APIRouter(prefix="/health", tags=["health"])


def _missing_tables(sync_session) -> list[str]:
    present = set(inspect(sync_session.connection()).get_table_names())
    return [table.name for table in Base.metadata.sorted_tables if table.name not in present]


@router.get("")
def health():
    return {"ok": True}


@router.get("/db")
async def health_db(db: AsyncSession = Depends(get_session)):
    """Reports whether the profiles, contracts and jobs tables are in place."""
    try:
        missing = await db.run_sync(_missing_tables)
    except Exception as e:
        return {"db": "down", "error": str(e)}
    return {"db": "up" if not missing else "incomplete", "missing": missing}
