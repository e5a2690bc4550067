# marketplace_api/jobs.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from . import crud
from .db import get_session
from .deps import get_profile
from .models import JobOut

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("/unpaid", response_model=List[JobOut])
async def list_unpaid_jobs(profile = Depends(get_profile), db: AsyncSession = Depends(get_session)):
    jobs = await crud.list_unpaid_jobs(db, profile)
    return [JobOut.model_validate(j) for j in jobs]
