"""Unpaid jobs come only from the caller's in-progress contracts."""

from datetime import datetime

from marketplace_api.orm import ContractStatus


async def test_unpaid_jobs_for_client(seeded, client, as_profile):
    resp = await client.get("/jobs/unpaid", headers=as_profile(1))
    assert resp.status_code == 200
    jobs = resp.json()
    assert [j["id"] for j in jobs] == [2]
    assert jobs[0]["paid"] is False
    assert jobs[0]["paymentDate"] is None
    assert jobs[0]["ContractId"] == 2
    assert jobs[0]["price"] == 201


async def test_unpaid_jobs_for_contractor(seeded, client, as_profile):
    resp = await client.get("/jobs/unpaid", headers=as_profile(6))
    assert [j["id"] for j in resp.json()] == [2, 3]


async def test_no_in_progress_contracts_gives_empty_list(seeded, client, as_profile):
    # profile 5 only has a terminated contract, which still holds an unpaid job
    resp = await client.get("/jobs/unpaid", headers=as_profile(5))
    assert resp.json() == []


async def test_empty_contract_set_never_matches_other_jobs(client, factory, as_profile):
    lonely = await factory.client(balance="100")
    busy = await factory.client(balance="100")
    contractor = await factory.contractor()
    contract = await factory.contract(busy, contractor)
    await factory.job(contract, 50)
    await factory.contract(lonely, contractor, status=ContractStatus.new)

    resp = await client.get("/jobs/unpaid", headers=as_profile(lonely))
    assert resp.json() == []

    resp = await client.get("/jobs/unpaid", headers=as_profile(busy))
    assert len(resp.json()) == 1


async def test_paid_jobs_are_left_out(client, factory, as_profile):
    payer = await factory.client(balance="100")
    contractor = await factory.contractor()
    contract = await factory.contract(payer, contractor)
    unpaid = await factory.job(contract, 10)
    await factory.job(contract, 20, paid_at=datetime(2021, 1, 1))

    resp = await client.get("/jobs/unpaid", headers=as_profile(payer))
    assert [j["id"] for j in resp.json()] == [unpaid]
