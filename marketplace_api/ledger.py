# marketplace_api/ledger.py
"""
Job settlement: moves a job's price from the paying client to the
contract's contractor and flags the job as paid.

The debit, the credit and the job flag are written in that order inside a
single transaction. The debit only applies while the balance still covers
the price, and the flag only applies while the job is still unpaid, so two
requests racing on the same job or the same payer cannot both succeed.
"""
import logging
from decimal import Decimal
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from .orm import Job, Profile, ProfileType, utcnow

logger = logging.getLogger("uvicorn")

ONLY_CLIENTS = "only clients can pay"
ALREADY_PAID = "already paid"
NOT_THE_CLIENT = "not the client of this job"
INSUFFICIENT_BALANCE = "insufficient balance"
JOB_PAID = "job paid"


class PaymentRejected(Exception):
    """A business rule refused the payment; the message goes back to the caller."""


class JobNotFound(LookupError):
    pass


async def pay_job(db: AsyncSession, job_id: Optional[int], payer: Profile) -> str:
    if payer.type != ProfileType.client:
        raise PaymentRejected(ONLY_CLIENTS)

    job = None
    if job_id is not None:
        stmt = select(Job).options(selectinload(Job.contract)).where(Job.id == job_id)
        job = await db.scalar(stmt)
    if job is None:
        raise JobNotFound(job_id)
    if job.paid:
        raise PaymentRejected(ALREADY_PAID)
    if job.contract.client_id != payer.id:
        raise PaymentRejected(NOT_THE_CLIENT)

    price = Decimal(job.price)
    if Decimal(payer.balance) < price:
        raise PaymentRejected(INSUFFICIENT_BALANCE)

    try:
        await _transfer(db, job, payer, price)
        await db.commit()
    except Exception:
        await db.rollback()
        raise

    logger.info(f"Job {job.id} paid: {price} from profile {payer.id} to profile {job.contract.contractor_id}")
    return JOB_PAID


async def _transfer(db: AsyncSession, job: Job, payer: Profile, price: Decimal) -> None:
    debit = await db.execute(
        update(Profile)
        .where(Profile.id == payer.id, Profile.balance >= price)
        .values({Profile.balance: Profile.balance - price})
        .execution_options(synchronize_session=False)
    )
    if debit.rowcount != 1:
        raise PaymentRejected(INSUFFICIENT_BALANCE)

    await db.execute(
        update(Profile)
        .where(Profile.id == job.contract.contractor_id)
        .values({Profile.balance: Profile.balance + price})
        .execution_options(synchronize_session=False)
    )

    flagged = await db.execute(
        update(Job)
        .where(Job.id == job.id, Job.paid.is_(False))
        .values({Job.paid: True, Job.payment_date: utcnow()})
        .execution_options(synchronize_session=False)
    )
    if flagged.rowcount != 1:
        raise PaymentRejected(ALREADY_PAID)
