"""ATM withdrawal orchestration - the machine itself"""

import logging
from threading import Lock
from typing import NoReturn
from atm_gateway.domain.bank import Bank
from atm_gateway.domain.dispenser import dispense
from atm_gateway.domain.exceptions import (
    AccountError,
    ATMOperationError,
    AuthorizationError,
    UnsatisfiableAmountError,
)
from atm_gateway.domain.models import (
    DEFAULT_CURRENCY,
    Card,
    ErrorCode,
    Money,
    MoneyDeposit,
    PinCode,
    Withdrawal,
)


class ATMachine:
    """Cash machine for one currency, backed by a bank collaborator"""

    def __init__(self, bank: Bank, currency: str = DEFAULT_CURRENCY):
        self._bank = bank
        self._currency = currency
        self._deposit = MoneyDeposit.empty(currency)
        self._lock = Lock()

    @property
    def currency(self) -> str:
        return self._currency

    @property
    def deposit(self) -> MoneyDeposit:
        with self._lock:
            return self._deposit

    def set_deposit(self, deposit: MoneyDeposit) -> None:
        """Replace the whole cash inventory; nothing is merged with the previous one."""
        if deposit.currency != self._currency:
            raise ValueError(
                f"Deposit currency {deposit.currency} does not match machine currency {self._currency}"
            )
        with self._lock:
            self._deposit = deposit

    def withdraw(self, pin: PinCode, card: Card, amount: Money) -> Withdrawal:
        """
        Pay out amount from the deposit and charge the card's account.

        Stages run in order and stop at the first failure:
        1. Currency check (no bank call on mismatch)     -> WRONG_CURRENCY
        2. Bank authorization                            -> AUTHORIZATION
        3. Banknote selection against the deposit        -> WRONG_AMOUNT
        4. Bank charge                                   -> NO_FUNDS_ON_ACCOUNT

        Raises:
            ATMOperationError: carrying the code of the failed stage
        """
        # 1. Currency
        if amount.currency != self._currency:
            self._reject(ErrorCode.WRONG_CURRENCY, card, amount)

        # 2. Authorization
        try:
            token = self._bank.authorize(pin.pin, card.number)
        except AuthorizationError as e:
            self._reject(ErrorCode.AUTHORIZATION, card, amount, e)

        # 3. Banknote selection
        if amount.amount <= 0:
            self._reject(ErrorCode.WRONG_AMOUNT, card, amount)
        try:
            banknotes = dispense(amount.amount, self.deposit)
        except UnsatisfiableAmountError as e:
            self._reject(ErrorCode.WRONG_AMOUNT, card, amount, e)

        # 4. Charge
        try:
            self._bank.charge(token, amount)
        except AccountError as e:
            self._reject(ErrorCode.NO_FUNDS_ON_ACCOUNT, card, amount, e)

        logging.info(
            "Withdrawal dispensed",
            extra={
                "card": card.masked(),
                "amount": amount.amount,
                "currency": amount.currency,
                "banknote_count": len(banknotes),
            },
        )
        return Withdrawal(banknotes=tuple(banknotes))

    def _reject(
        self,
        error_code: ErrorCode,
        card: Card,
        amount: Money,
        cause: Exception | None = None,
    ) -> NoReturn:
        logging.warning(
            f"Withdrawal rejected: {error_code.value}",
            extra={
                "card": card.masked(),
                "amount": amount.amount,
                "currency": amount.currency,
                "error_code": error_code.value,
            },
        )
        raise ATMOperationError(error_code, str(cause) if cause else None) from cause
