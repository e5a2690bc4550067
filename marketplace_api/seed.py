# marketplace_api/seed.py
import asyncio
import logging
from datetime import datetime
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from . import config
from .db import dispose_engine, get_engine, init_models
from .orm import Contract, ContractStatus, Job, Profile, ProfileType

log = logging.getLogger("uvicorn.error")

CLIENT = ProfileType.client
CONTRACTOR = ProfileType.contractor

PROFILES = [
    # id, first name, last name, profession, balance, type
    (1, "Harry", "Potter", "Wizard", "1150", CLIENT),
    (2, "Mr", "Robot", "Hacker", "231.11", CLIENT),
    (3, "John", "Snow", "Knows nothing", "451.3", CLIENT),
    (4, "Ash", "Kethcum", "Pokemon master", "1.3", CLIENT),
    (5, "John", "Lenon", "Musician", "64", CONTRACTOR),
    (6, "Linus", "Torvalds", "Programmer", "1214", CONTRACTOR),
    (7, "Alan", "Turing", "Programmer", "22", CONTRACTOR),
    (8, "Aragorn", "II Elessar Telcontarenar", "Fighter", "314", CONTRACTOR),
]

CONTRACTS = [
    # id, status, client, contractor
    (1, ContractStatus.terminated, 1, 5),
    (2, ContractStatus.in_progress, 1, 6),
    (3, ContractStatus.in_progress, 2, 6),
    (4, ContractStatus.in_progress, 2, 7),
    (5, ContractStatus.new, 3, 8),
    (6, ContractStatus.in_progress, 3, 7),
    (7, ContractStatus.in_progress, 4, 7),
    (8, ContractStatus.in_progress, 4, 6),
    (9, ContractStatus.in_progress, 4, 8),
]

JOBS = [
    # id, price, contract, payment date (None while unpaid)
    (1, "200", 1, None),
    (2, "201", 2, None),
    (3, "202", 3, None),
    (4, "200", 4, None),
    (5, "200", 7, None),
    (6, "2020", 7, datetime(2020, 8, 15, 19, 11, 26, 737000)),
    (7, "200", 2, datetime(2020, 8, 15, 19, 11, 26, 737000)),
    (8, "200", 3, datetime(2020, 8, 16, 19, 11, 26, 737000)),
    (9, "200", 1, datetime(2020, 8, 17, 19, 11, 26, 737000)),
    (10, "200", 5, datetime(2020, 8, 17, 19, 11, 26, 737000)),
    (11, "21", 1, datetime(2020, 8, 10, 19, 11, 26, 737000)),
    (12, "21", 2, datetime(2020, 8, 15, 19, 11, 26, 737000)),
    (13, "121", 3, datetime(2020, 8, 15, 19, 11, 26, 737000)),
    (14, "121", 3, datetime(2020, 8, 14, 23, 11, 26, 737000)),
]


async def seed(engine: AsyncEngine) -> None:
    """Drop and recreate all tables, then load the demo dataset."""
    await init_models(engine, drop=True)

    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as session:
        session.add_all([
            Profile(id=pid, first_name=first, last_name=last, profession=profession,
                    balance=Decimal(balance), type=ptype)
            for pid, first, last, profession, balance, ptype in PROFILES
        ])
        await session.flush()
        session.add_all([
            Contract(id=cid, terms="bla bla bla", status=status, client_id=client, contractor_id=contractor)
            for cid, status, client, contractor in CONTRACTS
        ])
        await session.flush()
        session.add_all([
            Job(id=jid, description="work", price=Decimal(price), contract_id=contract,
                paid=paid_at is not None, payment_date=paid_at)
            for jid, price, contract, paid_at in JOBS
        ])
        await session.commit()

    log.info(f"Seeded {len(PROFILES)} profiles, {len(CONTRACTS)} contracts, {len(JOBS)} jobs")


async def main():
    try:
        await seed(get_engine())
    finally:
        await dispose_engine()


if __name__ == "__main__":
    logging.basicConfig(level=config.LOG_LEVEL)
    asyncio.run(main())
