# marketplace_api/admin.py
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from . import reports
from .db import get_session
from .models import BestClient, BestProfession

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/best-profession", response_model=BestProfession)
async def best_profession(
    start: Optional[str] = Query(default=None),
    end: Optional[str] = Query(default=None),
    db: AsyncSession = Depends(get_session),
):
    try:
        start_at, end_at = reports.parse_range(start, end)
        return await reports.best_profession(db, start_at, end_at)
    except reports.ReportError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail)


@router.get("/best-clients", response_model=List[BestClient])
async def best_clients(
    start: Optional[str] = Query(default=None),
    end: Optional[str] = Query(default=None),
    limit: Optional[str] = Query(default=None),
    db: AsyncSession = Depends(get_session),
):
    try:
        start_at, end_at = reports.parse_range(start, end)
        return await reports.best_clients(db, start_at, end_at, reports.parse_limit(limit))
    except reports.ReportError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail)
