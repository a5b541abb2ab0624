"""Domain-specific exceptions"""

from atm_gateway.domain.models import ErrorCode


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ATMOperationError(DomainException):
    """Withdrawal failed at one stage; carries exactly one ErrorCode"""

    def __init__(self, error_code: ErrorCode, message: str | None = None):
        self.error_code = error_code
        super().__init__(message or error_code.value)


class BankError(DomainException):
    """Bank collaborator rejected a call or is unavailable"""

    pass


class AuthorizationError(BankError):
    """Card or PIN rejected by the bank"""

    pass


class AccountError(BankError):
    """Account could not be charged (insufficient funds, blocked account)"""

    pass


class UnsatisfiableAmountError(DomainException):
    """Deposit cannot pay out the amount exactly with the greedy selection"""

    def __init__(self, amount: int, remainder: int):
        self.amount = amount
        self.remainder = remainder
        super().__init__(f"Cannot dispense {amount}: {remainder} left after banknote selection")
