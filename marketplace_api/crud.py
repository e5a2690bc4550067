# marketplace_api/crud.py
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .orm import Contract, ContractStatus, Job, Profile, ProfileType


def belongs_to_key(profile: Profile):
    """Contract column that scopes a query to the caller: ClientId or ContractorId."""
    if profile.type == ProfileType.client:
        return Contract.client_id
    return Contract.contractor_id


async def get_contract(db: AsyncSession, contract_id: int, profile: Profile) -> Contract | None:
    stmt = select(Contract).where(
        Contract.id == contract_id,
        belongs_to_key(profile) == profile.id,
    )
    return await db.scalar(stmt)


async def list_contracts(db: AsyncSession, profile: Profile) -> list[Contract]:
    stmt = (
        select(Contract)
        .where(belongs_to_key(profile) == profile.id)
        .where(Contract.status != ContractStatus.terminated)
        .order_by(Contract.id)
    )
    return list((await db.scalars(stmt)).all())


async def list_unpaid_jobs(db: AsyncSession, profile: Profile) -> list[Job]:
    active = select(Contract.id).where(
        belongs_to_key(profile) == profile.id,
        Contract.status == ContractStatus.in_progress,
    )
    contract_ids = list((await db.scalars(active)).all())
    # an empty IN () must not turn into "every job"
    if not contract_ids:
        return []

    stmt = (
        select(Job)
        .where(Job.contract_id.in_(contract_ids))
        .where(Job.paid.is_not(True))
        .order_by(Job.id)
    )
    return list((await db.scalars(stmt)).all())
