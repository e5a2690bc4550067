# marketplace_api/contracts.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from . import crud
from .db import get_session
from .deps import get_profile
from .models import ContractOut
from .utils import ensure_not_none, parse_id

router = APIRouter(prefix="/contracts", tags=["contracts"])


@router.get("", response_model=List[ContractOut])
async def list_contracts(profile = Depends(get_profile), db: AsyncSession = Depends(get_session)):
    contracts = await crud.list_contracts(db, profile)
    return [ContractOut.model_validate(c) for c in contracts]


@router.get("/{contract_id}", response_model=ContractOut)
async def get_contract(contract_id: str, profile = Depends(get_profile), db: AsyncSession = Depends(get_session)):
    # someone else's contract, or an id that cannot exist, reads exactly like a missing one
    key = parse_id(contract_id)
    contract = await crud.get_contract(db, key, profile) if key is not None else None
    contract = ensure_not_none(contract, "Contract not found")
    return ContractOut.model_validate(contract)
