"""Data access layer for the withdrawal journal"""

import hashlib
from typing import List, Sequence
from sqlalchemy.orm import Session
from atm_gateway.infrastructure.database.models import WithdrawalRecord
from atm_gateway.domain.models import Banknote, Card, ErrorCode, Money


def _fingerprint(card: Card) -> str:
    return hashlib.sha256(card.number.encode("utf-8")).hexdigest()


class WithdrawalRepository:
    """Repository for withdrawal attempts"""

    def __init__(self, db: Session):
        self.db = db

    def record(
        self,
        card: Card,
        amount: Money,
        banknotes: Sequence[Banknote] = (),
        error_code: ErrorCode | None = None,
    ) -> WithdrawalRecord:
        """Journal one attempt; the card number is stored masked and fingerprinted"""
        db_record = WithdrawalRecord(
            card_fingerprint=_fingerprint(card),
            card_number=card.masked(),
            amount=amount.amount,
            currency=amount.currency,
            succeeded=error_code is None,
            error_code=error_code.value if error_code else None,
            banknotes=[note.value for note in banknotes],
        )
        self.db.add(db_record)
        self.db.flush()  # Get ID without committing
        return db_record

    def recent_for_card(self, card: Card, limit: int = 10) -> List[WithdrawalRecord]:
        """Fetch recent attempts for a card"""
        return (
            self.db.query(WithdrawalRecord)
            .filter(WithdrawalRecord.card_fingerprint == _fingerprint(card))
            .order_by(WithdrawalRecord.created_at.desc())
            .limit(limit)
            .all()
        )
