"""Dependency injection for FastAPI endpoints"""

from functools import lru_cache
from fastapi import Request
from atm_gateway.config import settings
from atm_gateway.domain.machine import ATMachine
from atm_gateway.infrastructure.clients.bank import HttpBankClient


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_bank_client() -> HttpBankClient:
    """Provide Bank API client instance"""
    return HttpBankClient()


@lru_cache(maxsize=1)
def get_machine() -> ATMachine:
    """Provide the process-wide machine; its deposit persists across requests"""
    return ATMachine(get_bank_client(), settings.currency)
