# marketplace_api/payments.py
import logging
from typing import Union

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from . import ledger
from .db import get_session
from .deps import get_profile
from .models import PaymentFailure, PaymentOut
from .utils import parse_id

router = APIRouter(prefix="/jobs", tags=["payments"])

logger = logging.getLogger("uvicorn")


@router.post("/{job_id}/pay", response_model=Union[PaymentOut, PaymentFailure])
async def pay_job(job_id: str, profile = Depends(get_profile), db: AsyncSession = Depends(get_session)):
    payer_id = profile.id
    try:
        message = await ledger.pay_job(db, parse_id(job_id), profile)
    except ledger.JobNotFound:
        raise HTTPException(status_code=404, detail="Job not found")
    except ledger.PaymentRejected as e:
        logger.info(f"Payment of job {job_id} by profile {payer_id} rejected: {e}")
        return PaymentFailure(error=str(e))
    return PaymentOut(status=True, message=message)
