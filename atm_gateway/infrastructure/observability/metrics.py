"""Prometheus metrics for withdrawal outcomes, cash levels, and bank call failures"""

from typing import Iterable
from prometheus_client import Counter, Histogram, Gauge
from atm_gateway.domain.models import Banknote, ErrorCode, MoneyDeposit

# Withdrawal metrics
withdrawal_counter = Counter(
    "atm_withdrawal_total",
    "Total withdrawal attempts",
    ["outcome"],  # success | wrong_currency | authorization | wrong_amount | no_funds_on_account
)

banknotes_dispensed_counter = Counter(
    "atm_banknotes_dispensed_total",
    "Banknotes handed out by successful withdrawals",
    ["denomination"],
)

# Cash level
deposit_banknotes_gauge = Gauge(
    "atm_deposit_banknotes",
    "Banknotes loaded in the deposit by denomination",
    ["denomination"],
)

# Bank API metrics
bank_call_failures_counter = Counter(
    "atm_bank_call_failures_total",
    "Failed bank API calls",
    ["operation"],  # authorize | charge
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)

_FAILED_BANK_OPERATION = {
    ErrorCode.AUTHORIZATION: "authorize",
    ErrorCode.NO_FUNDS_ON_ACCOUNT: "charge",
}


def record_withdrawal(banknotes: Iterable[Banknote]) -> None:
    """Record a successful withdrawal and the notes it paid out"""
    withdrawal_counter.labels(outcome="success").inc()
    for note in banknotes:
        banknotes_dispensed_counter.labels(denomination=str(note.value)).inc()


def record_withdrawal_failure(error_code: ErrorCode) -> None:
    """Record a rejected withdrawal; bank-side stages also count as bank call failures"""
    withdrawal_counter.labels(outcome=error_code.value.lower()).inc()

    operation = _FAILED_BANK_OPERATION.get(error_code)
    if operation:
        bank_call_failures_counter.labels(operation=operation).inc()


def record_deposit(deposit: MoneyDeposit) -> None:
    """Publish loaded banknote counts; denominations missing from the deposit read 0"""
    available = deposit.available()
    for note in Banknote:
        deposit_banknotes_gauge.labels(denomination=str(note.value)).set(available.get(note, 0))
