"""SQLAlchemy ORM models for the withdrawal journal"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, BigInteger, Boolean, DateTime, Text, JSON, Uuid
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class WithdrawalRecord(Base):
    """One withdrawal attempt, successful or rejected"""

    __tablename__ = "atm_withdrawal"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    card_fingerprint = Column(String(64), nullable=False, index=True)  # sha256 of the card number
    card_number = Column(Text, nullable=False)  # masked
    amount = Column(BigInteger, nullable=False)
    currency = Column(String(3), nullable=False)
    succeeded = Column(Boolean, nullable=False)
    error_code = Column(Text, nullable=True)
    banknotes = Column(JSON, nullable=False, default=list)  # face values, highest first
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
