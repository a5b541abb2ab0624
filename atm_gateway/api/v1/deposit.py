"""GET/PUT /v1/deposit - inspect or replace the machine's cash inventory"""

import logging
from fastapi import APIRouter, Depends, HTTPException

from atm_gateway.api.v1.schemas import DepositRequest, DepositResponse, PackSchema
from atm_gateway.api.dependencies import get_machine
from atm_gateway.domain.machine import ATMachine
from atm_gateway.domain.models import Banknote, BanknotesPack, MoneyDeposit
from atm_gateway.infrastructure.observability.metrics import record_deposit

router = APIRouter()


def _to_response(deposit: MoneyDeposit) -> DepositResponse:
    return DepositResponse(
        currency=deposit.currency,
        packs=[PackSchema(denomination=p.banknote.value, count=p.count) for p in deposit.packs],
        total=deposit.total,
    )


@router.get("/deposit", response_model=DepositResponse)
def get_deposit(machine: ATMachine = Depends(get_machine)):
    """Current cash inventory, highest denomination first"""
    return _to_response(machine.deposit)


@router.put("/deposit", response_model=DepositResponse)
def replace_deposit(request_body: DepositRequest, machine: ATMachine = Depends(get_machine)):
    """
    Replace the whole cash inventory.

    The new packs are not merged with what was loaded before.
    """
    try:
        deposit = MoneyDeposit.create(
            request_body.currency or machine.currency,
            [BanknotesPack.create(p.count, Banknote.from_value(p.denomination)) for p in request_body.packs],
        )
        machine.set_deposit(deposit)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    record_deposit(deposit)
    logging.info("Deposit replaced", extra={"currency": deposit.currency, "total": deposit.total})

    return _to_response(deposit)
