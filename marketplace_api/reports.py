# marketplace_api/reports.py
"""
Admin reports over jobs paid within a date range.

Amounts are summed per contract first, then folded per profession or per
client. Ranking uses a stable sort, so ties keep the order in which the
contracts were first met while scanning jobs by id.
"""
from datetime import date, datetime, time, timezone
from decimal import Decimal
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from .models import BestClient, BestProfession
from .orm import Contract, Job

DEFAULT_CLIENTS_LIMIT = 2


class ReportError(Exception):
    def __init__(self, status_code: int, detail: str):
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail


def _parse_bound(value: str, name: str, end_of_day: bool = False) -> datetime:
    value = value.strip()
    try:
        day = date.fromisoformat(value)
    except ValueError:
        day = None
    if day is not None:
        return datetime.combine(day, time.max if end_of_day else time.min)

    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    except (ValueError, OverflowError):
        raise ReportError(400, f"Invalid {name} date: {value}")
    return parsed


def parse_range(start: Optional[str], end: Optional[str]) -> tuple[datetime, datetime]:
    """Both bounds are inclusive; a date-only end covers that whole day."""
    if not start or not end:
        raise ReportError(400, "start and end are required")
    start_at = _parse_bound(start, "start")
    end_at = _parse_bound(end, "end", end_of_day=True)
    if start_at > end_at:
        raise ReportError(400, "start must not be after end")
    return start_at, end_at


def parse_limit(limit: Optional[str]) -> int:
    if limit is None or limit == "":
        return DEFAULT_CLIENTS_LIMIT
    try:
        value = int(limit)
    except ValueError:
        raise ReportError(400, f"Invalid limit: {limit}")
    if value < 1:
        raise ReportError(400, "limit must be a positive integer")
    return value


async def _jobs_paid_between(db: AsyncSession, start_at: datetime, end_at: datetime) -> list[Job]:
    stmt = (
        select(Job)
        .options(
            selectinload(Job.contract).options(
                selectinload(Contract.client),
                selectinload(Contract.contractor),
            )
        )
        .where(Job.payment_date.between(start_at, end_at))
        .order_by(Job.id)
    )
    jobs = list((await db.scalars(stmt)).all())
    if not jobs:
        raise ReportError(404, "No paid jobs in range")
    return jobs


def _totals_per_contract(jobs: list[Job]) -> dict[int, tuple[Contract, Decimal]]:
    totals: dict[int, tuple[Contract, Decimal]] = {}
    for job in jobs:
        contract, amount = totals.get(job.contract_id, (job.contract, Decimal(0)))
        totals[job.contract_id] = (contract, amount + Decimal(job.price))
    return totals


def _ranked(totals: dict) -> list:
    return sorted(totals.items(), key=lambda item: item[1], reverse=True)


async def best_profession(db: AsyncSession, start_at: datetime, end_at: datetime) -> BestProfession:
    jobs = await _jobs_paid_between(db, start_at, end_at)

    per_profession: dict[str, Decimal] = {}
    for contract, amount in _totals_per_contract(jobs).values():
        profession = contract.contractor.profession
        per_profession[profession] = per_profession.get(profession, Decimal(0)) + amount

    profession, amount = _ranked(per_profession)[0]
    return BestProfession(profession=profession, amount_paid=amount)


async def best_clients(db: AsyncSession, start_at: datetime, end_at: datetime,
                       limit: int = DEFAULT_CLIENTS_LIMIT) -> list[BestClient]:
    jobs = await _jobs_paid_between(db, start_at, end_at)

    names: dict[int, str] = {}
    per_client: dict[int, Decimal] = {}
    for contract, amount in _totals_per_contract(jobs).values():
        client = contract.client
        names[client.id] = client.full_name
        per_client[client.id] = per_client.get(client.id, Decimal(0)) + amount

    return [
        BestClient(id=client_id, full_name=names[client_id], paid=amount)
        for client_id, amount in _ranked(per_client)[:limit]
    ]
