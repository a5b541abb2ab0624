"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from typing import List, Optional


class WithdrawalRequest(BaseModel):
    """Request body for POST /v1/withdrawal"""

    pin: str = Field(..., pattern=r"^[0-9]{4}$", description="Four-digit PIN")
    card_number: str = Field(..., min_length=1, description="Card identifier")
    amount: int = Field(..., ge=0, description="Requested amount in whole currency units")
    currency: Optional[str] = Field(None, pattern=r"^[A-Z]{3}$", description="Defaults to the machine currency")


class WithdrawalResponse(BaseModel):
    """Response for POST /v1/withdrawal"""

    banknotes: List[int]
    amount: int
    currency: str


class PackSchema(BaseModel):
    """Banknotes of one denomination"""

    denomination: int = Field(..., gt=0, description="Face value")
    count: int = Field(..., ge=0)


class DepositRequest(BaseModel):
    """Request body for PUT /v1/deposit"""

    currency: Optional[str] = Field(None, pattern=r"^[A-Z]{3}$", description="Defaults to the machine currency")
    packs: List[PackSchema]


class DepositResponse(BaseModel):
    """Response for GET/PUT /v1/deposit"""

    currency: str
    packs: List[PackSchema]
    total: int


class HistoryItem(BaseModel):
    """Single withdrawal attempt in history"""

    withdrawal_id: str
    card_number: str
    amount: int
    currency: str
    succeeded: bool
    error_code: Optional[str] = None
    banknotes: List[int]
    created_at: str


class HistoryResponse(BaseModel):
    """Response for GET /v1/withdrawal/history"""

    card_number: str
    withdrawals: List[HistoryItem]
