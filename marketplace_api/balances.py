# marketplace_api/balances.py
from fastapi import APIRouter, HTTPException

router = APIRouter(prefix="/balances", tags=["balances"])


@router.post("/deposit/{user_id}")
async def deposit(user_id: str):
    # deposits are not offered yet
    raise HTTPException(status_code=404, detail="Not implemented")
