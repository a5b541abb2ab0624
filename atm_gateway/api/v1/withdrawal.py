"""POST /v1/withdrawal - cash withdrawal endpoint"""

import time
import logging
from typing import Callable
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from atm_gateway.api.v1.schemas import WithdrawalRequest, WithdrawalResponse
from atm_gateway.api.dependencies import get_machine, get_request_id
from atm_gateway.infrastructure.database.session import get_db
from atm_gateway.infrastructure.database.repositories import WithdrawalRepository
from atm_gateway.domain.machine import ATMachine
from atm_gateway.domain.models import Card, ErrorCode, Money, PinCode
from atm_gateway.domain.exceptions import ATMOperationError
from atm_gateway.infrastructure.observability.metrics import record_withdrawal, record_withdrawal_failure
from atm_gateway.infrastructure.observability.logging import log_withdrawal

router = APIRouter()

ERROR_STATUS = {
    ErrorCode.WRONG_CURRENCY: 400,
    ErrorCode.AUTHORIZATION: 401,
    ErrorCode.NO_FUNDS_ON_ACCOUNT: 402,
    ErrorCode.WRONG_AMOUNT: 422,
}


@router.post("/withdrawal", response_model=WithdrawalResponse)
def create_withdrawal(
    request_body: WithdrawalRequest,
    request: Request,
    db: Session = Depends(get_db),
    machine: ATMachine = Depends(get_machine),
):
    """
    Withdraw cash from the machine.

    Flow:
    1. Build PIN, card and amount (amount defaults to the machine currency)
    2. Run the machine: currency check, authorize, pick banknotes, charge
    3. Journal the attempt, successful or not (a journal failure is logged, never returned)
    4. Return banknote face values, highest first
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        pin = PinCode.from_string(request_body.pin)
        card = Card.create(request_body.card_number)
        amount = Money(request_body.amount, request_body.currency or machine.currency)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    withdrawal_repo = WithdrawalRepository(db)

    try:
        withdrawal = machine.withdraw(pin, card, amount)
    except ATMOperationError as e:
        _journal(db, request_id, lambda: withdrawal_repo.record(card, amount, error_code=e.error_code))

        duration_ms = (time.time() - start_time) * 1000
        record_withdrawal_failure(e.error_code)
        log_withdrawal(request_id, card.masked(), amount.amount, amount.currency, e.error_code.value.lower(), duration_ms)

        raise HTTPException(
            status_code=ERROR_STATUS[e.error_code],
            detail={"error_code": e.error_code.value, "message": str(e)},
        )

    _journal(db, request_id, lambda: withdrawal_repo.record(card, amount, banknotes=withdrawal.banknotes))

    # Record metrics and logs
    duration_ms = (time.time() - start_time) * 1000
    record_withdrawal(withdrawal.banknotes)
    log_withdrawal(request_id, card.masked(), amount.amount, amount.currency, "success", duration_ms)

    return WithdrawalResponse(
        banknotes=[note.value for note in withdrawal.banknotes],
        amount=amount.amount,
        currency=amount.currency,
    )


def _journal(db: Session, request_id: str, write: Callable[[], object]) -> None:
    """Persist a journal entry; the withdrawal outcome stands even if this fails"""
    try:
        write()
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logging.error(f"Withdrawal journal error: {e}", extra={"request_id": request_id})
