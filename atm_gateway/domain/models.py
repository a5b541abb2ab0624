"""Domain models - pure Python value objects for the withdrawal engine"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Tuple

DEFAULT_CURRENCY = "PLN"

_CURRENCY_PATTERN = re.compile(r"^[A-Z]{3}$")


class ErrorCode(str, Enum):
    """Stage at which a withdrawal failed"""

    WRONG_CURRENCY = "WRONG_CURRENCY"
    AUTHORIZATION = "AUTHORIZATION"
    WRONG_AMOUNT = "WRONG_AMOUNT"
    NO_FUNDS_ON_ACCOUNT = "NO_FUNDS_ON_ACCOUNT"


class Banknote(Enum):
    """Known banknote denominations of the default currency; value is the face value"""

    PL_10 = 10
    PL_20 = 20
    PL_50 = 50
    PL_100 = 100
    PL_200 = 200
    PL_500 = 500

    @classmethod
    def descending(cls) -> List["Banknote"]:
        """Catalog order: highest face value first"""
        return sorted(cls, key=lambda note: note.value, reverse=True)

    @classmethod
    def from_value(cls, value: int) -> "Banknote":
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Unknown banknote denomination: {value}") from None


@dataclass(frozen=True)
class Money:
    """Amount in whole currency units paired with an ISO 4217 currency code"""

    amount: int
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise ValueError(f"Amount must be an integer, got {self.amount!r}")
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")
        if not isinstance(self.currency, str) or not _CURRENCY_PATTERN.match(self.currency):
            raise ValueError(f"Invalid currency code: {self.currency!r}")


@dataclass(frozen=True)
class PinCode:
    """Four-digit PIN; digits are validated at creation"""

    digits: Tuple[int, int, int, int] = field(repr=False)

    def __post_init__(self) -> None:
        if len(self.digits) != 4:
            raise ValueError("PIN must have exactly four digits")
        for digit in self.digits:
            if isinstance(digit, bool) or not isinstance(digit, int) or not 0 <= digit <= 9:
                raise ValueError("PIN digits must be integers between 0 and 9")

    @classmethod
    def create_pin(cls, d1: int, d2: int, d3: int, d4: int) -> "PinCode":
        return cls(digits=(d1, d2, d3, d4))

    @classmethod
    def from_string(cls, raw: str) -> "PinCode":
        if len(raw) != 4 or not raw.isdigit() or not raw.isascii():
            raise ValueError("PIN must be a string of four digits")
        return cls(digits=tuple(int(ch) for ch in raw))

    @property
    def pin(self) -> str:
        return "".join(str(d) for d in self.digits)

    def __repr__(self) -> str:
        return "PinCode(****)"


@dataclass(frozen=True)
class Card:
    """Opaque card / account identifier"""

    number: str

    def __post_init__(self) -> None:
        if not isinstance(self.number, str) or not self.number.strip():
            raise ValueError("Card number cannot be blank")

    @classmethod
    def create(cls, number: str) -> "Card":
        return cls(number=number)

    def masked(self) -> str:
        """Card number with everything but the last four characters hidden"""
        return self.number[-4:].rjust(len(self.number), "*")


@dataclass(frozen=True)
class AuthorizationToken:
    """Proof of a successful authorize call, used once to charge"""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("Authorization token cannot be blank")

    @classmethod
    def create(cls, value: str) -> "AuthorizationToken":
        return cls(value=value)


@dataclass(frozen=True)
class BanknotesPack:
    """Available quantity of one denomination"""

    count: int
    banknote: Banknote

    def __post_init__(self) -> None:
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise ValueError(f"Pack count must be an integer, got {self.count!r}")
        if self.count < 0:
            raise ValueError("Pack count cannot be negative")
        if not isinstance(self.banknote, Banknote):
            raise ValueError(f"Unknown banknote: {self.banknote!r}")

    @classmethod
    def create(cls, count: int, banknote: Banknote) -> "BanknotesPack":
        return cls(count=count, banknote=banknote)

    @property
    def total(self) -> int:
        return self.count * self.banknote.value


@dataclass(frozen=True)
class MoneyDeposit:
    """
    Cash inventory of the machine for one currency.

    Packs are kept in catalog order (highest denomination first), at most one
    per denomination. Zero-count packs are dropped at construction.
    """

    currency: str
    packs: Tuple[BanknotesPack, ...] = ()

    @classmethod
    def create(cls, currency: str, packs: Iterable[BanknotesPack]) -> "MoneyDeposit":
        by_banknote: Dict[Banknote, BanknotesPack] = {}
        for pack in packs:
            if pack.banknote in by_banknote:
                raise ValueError(f"Duplicate pack for {pack.banknote.name}")
            by_banknote[pack.banknote] = pack

        ordered = tuple(
            by_banknote[note]
            for note in Banknote.descending()
            if note in by_banknote and by_banknote[note].count > 0
        )
        return cls(currency=currency, packs=ordered)

    @classmethod
    def empty(cls, currency: str = DEFAULT_CURRENCY) -> "MoneyDeposit":
        return cls(currency=currency)

    def available(self) -> Dict[Banknote, int]:
        """Banknote counts keyed by denomination (a copy)"""
        return {pack.banknote: pack.count for pack in self.packs}

    @property
    def total(self) -> int:
        return sum(pack.total for pack in self.packs)


@dataclass(frozen=True)
class Withdrawal:
    """Banknotes handed out by a successful withdrawal, highest first"""

    banknotes: Tuple[Banknote, ...]

    @property
    def total(self) -> int:
        return sum(note.value for note in self.banknotes)
