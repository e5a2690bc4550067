# marketplace_api/deps.py
import logging
from typing import Optional

from fastapi import Depends, Header, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from .db import get_session
from .orm import Profile
from .utils import parse_id

log = logging.getLogger("uvicorn.error")


async def get_profile(
    profile_id: Optional[str] = Header(default=None, alias="profile_id", convert_underscores=False),
    db: AsyncSession = Depends(get_session),
) -> Profile:
    """Resolve the caller from the `profile_id` header; anything unresolvable is a 401."""
    caller_id = parse_id(profile_id)
    if caller_id is None:
        raise HTTPException(status_code=401)
    profile = await db.get(Profile, caller_id)
    if profile is None:
        log.warning(f"Unknown profile_id {profile_id}")
        raise HTTPException(status_code=401)
    return profile
