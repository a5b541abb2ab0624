"""GET /v1/withdrawal/history - Fetch a card's withdrawal attempts"""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from atm_gateway.api.v1.schemas import HistoryResponse, HistoryItem
from atm_gateway.config import settings
from atm_gateway.domain.models import Card
from atm_gateway.infrastructure.database.session import get_db
from atm_gateway.infrastructure.database.repositories import WithdrawalRepository

router = APIRouter()


@router.get("/withdrawal/history", response_model=HistoryResponse)
def get_withdrawal_history(
    card_number: str = Query(..., description="Card identifier"),
    db: Session = Depends(get_db),
):
    """
    Retrieve recent withdrawal attempts for a card.

    Returns:
        Successful and rejected attempts, newest first; card numbers masked
    """
    try:
        card = Card.create(card_number)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    withdrawal_repo = WithdrawalRepository(db)
    records = withdrawal_repo.recent_for_card(card, limit=settings.history_limit)

    history_items = [
        HistoryItem(
            withdrawal_id=str(r.id),
            card_number=r.card_number,
            amount=r.amount,
            currency=r.currency,
            succeeded=r.succeeded,
            error_code=r.error_code,
            banknotes=r.banknotes,
            created_at=r.created_at.isoformat(),
        )
        for r in records
    ]

    return HistoryResponse(card_number=card.masked(), withdrawals=history_items)
