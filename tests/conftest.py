"""Pytest fixtures for testing"""

import pytest
from typing import Generator
from unittest.mock import Mock
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from atm_gateway.api.main import create_app
from atm_gateway.api.dependencies import get_machine
from atm_gateway.infrastructure.database.models import Base
from atm_gateway.infrastructure.database.session import get_db
from atm_gateway.domain.machine import ATMachine
from atm_gateway.domain.models import (
    DEFAULT_CURRENCY,
    AuthorizationToken,
    Banknote,
    BanknotesPack,
    Card,
    Money,
    MoneyDeposit,
    PinCode,
)


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def bank() -> Mock:
    """Bank double that authorizes every card and accepts every charge"""
    bank = Mock(spec=["authorize", "charge"])
    bank.authorize.return_value = AuthorizationToken.create("token")
    bank.charge.return_value = None
    return bank


@pytest.fixture
def standard_deposit() -> MoneyDeposit:
    """3x50, 2x20, 4x10"""
    return MoneyDeposit.create(
        DEFAULT_CURRENCY,
        [
            BanknotesPack.create(3, Banknote.PL_50),
            BanknotesPack.create(2, Banknote.PL_20),
            BanknotesPack.create(4, Banknote.PL_10),
        ],
    )


@pytest.fixture
def machine(bank: Mock) -> ATMachine:
    return ATMachine(bank, DEFAULT_CURRENCY)


@pytest.fixture
def pin_code() -> PinCode:
    return PinCode.create_pin(1, 2, 3, 4)


@pytest.fixture
def card() -> Card:
    return Card.create("card1")


@pytest.fixture
def amount() -> Money:
    return Money(70, DEFAULT_CURRENCY)


@pytest.fixture
def client(db: Session, machine: ATMachine) -> TestClient:
    """Create FastAPI test client with test database and a machine backed by the bank double"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_machine] = lambda: machine
    return TestClient(app)
