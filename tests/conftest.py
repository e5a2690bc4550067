"""
Pytest fixtures for the marketplace API test suite.

Every test gets its own SQLite file under tmp_path, an httpx client bound
to the ASGI app, and a `factory` for building profiles, contracts and jobs.
Tests that want the demo dataset request `seeded`.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from marketplace_api.db import get_session, init_models
from marketplace_api.main import app
from marketplace_api.orm import Contract, ContractStatus, Job, Profile, ProfileType
from marketplace_api.seed import seed


def _profile_headers(profile_id: int) -> dict:
    return {"profile_id": str(profile_id)}


@pytest.fixture
def as_profile():
    """Headers resolving the caller to a profile id."""
    return _profile_headers


@pytest.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.sqlite3'}")
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest.fixture
async def client(session_factory):
    async def _session_override():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = _session_override
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def seeded(engine):
    await seed(engine)
    return engine


class Factory:
    def __init__(self, session_factory):
        self._sessions = session_factory

    async def _add(self, obj) -> int:
        async with self._sessions() as session:
            session.add(obj)
            await session.commit()
            return obj.id

    async def client(self, balance="0", first="Client", last="User", profession="Buyer") -> int:
        return await self._add(Profile(first_name=first, last_name=last, profession=profession,
                                       balance=Decimal(balance), type=ProfileType.client))

    async def contractor(self, profession="Programmer", balance="0", first="Contractor", last="User") -> int:
        return await self._add(Profile(first_name=first, last_name=last, profession=profession,
                                       balance=Decimal(balance), type=ProfileType.contractor))

    async def contract(self, client_id: int, contractor_id: int,
                       status: ContractStatus = ContractStatus.in_progress) -> int:
        return await self._add(Contract(terms="terms", status=status,
                                        client_id=client_id, contractor_id=contractor_id))

    async def job(self, contract_id: int, price, paid_at: Optional[datetime] = None) -> int:
        return await self._add(Job(description="work", price=Decimal(str(price)), contract_id=contract_id,
                                   paid=paid_at is not None, payment_date=paid_at))

    async def balance(self, profile_id: int) -> Decimal:
        async with self._sessions() as session:
            profile = await session.get(Profile, profile_id)
            return Decimal(profile.balance)

    async def get_job(self, job_id: int) -> Job:
        async with self._sessions() as session:
            return await session.get(Job, job_id)


@pytest.fixture
def factory(session_factory):
    return Factory(session_factory)
