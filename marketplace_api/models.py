# marketplace_api/models.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .orm import ContractStatus


class ContractOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    terms: str
    status: ContractStatus
    client_id: int = Field(alias="ClientId")
    contractor_id: int = Field(alias="ContractorId")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")


class JobOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    description: str
    price: float
    paid: bool
    payment_date: Optional[datetime] = Field(default=None, alias="paymentDate")
    contract_id: int = Field(alias="ContractId")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")


class PaymentOut(BaseModel):
    status: bool
    message: str


class PaymentFailure(BaseModel):
    success: bool = False
    error: str


class BestProfession(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    profession: str
    amount_paid: float = Field(alias="amountPaid")


class BestClient(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    full_name: str = Field(alias="fullname")
    paid: float
