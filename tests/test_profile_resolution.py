"""The profile_id header decides who the caller is; anything else is a 401."""

import pytest

pytestmark = pytest.mark.usefixtures("seeded")


async def test_missing_header_is_unauthorized(client):
    resp = await client.get("/contracts")
    assert resp.status_code == 401


@pytest.mark.parametrize("value", [
    "", "abc", "-1", "1.5",
    # latin-1 superscript two: a unicode digit int() rejects
    "\u00b2".encode("latin-1"),
    "99999999999999999999999",
])
async def test_malformed_header_is_unauthorized(client, value):
    resp = await client.get("/contracts", headers={"profile_id": value})
    assert resp.status_code == 401


async def test_unknown_profile_is_unauthorized(client, as_profile):
    resp = await client.get("/contracts", headers=as_profile(999))
    assert resp.status_code == 401


async def test_known_profile_is_resolved(client, as_profile):
    resp = await client.get("/contracts", headers=as_profile(1))
    assert resp.status_code == 200
