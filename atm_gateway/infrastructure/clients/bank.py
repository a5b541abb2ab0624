"""Bank API HTTP client for card authorization and account charges"""

import httpx
from atm_gateway.domain.models import AuthorizationToken, Money
from atm_gateway.domain.exceptions import AccountError, AuthorizationError
from atm_gateway.config import settings


class HttpBankClient:
    """Client for external bank authorization/ledger API"""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = base_url or settings.bank_api_base
        self.timeout = settings.http_timeout_seconds if timeout is None else timeout
        self.transport = transport

    def _client(self) -> httpx.Client:
        return httpx.Client(base_url=self.base_url, timeout=self.timeout, transport=self.transport)

    def authorize(self, pin: str, card_number: str) -> AuthorizationToken:
        """
        Exchange card credentials for a one-shot authorization token.

        Raises:
            AuthorizationError: On rejected credentials, timeout, HTTP errors, or invalid response
        """
        with self._client() as client:
            try:
                response = client.post(
                    "/bank/authorize",
                    json={"pin": pin, "card_number": card_number},
                )
                response.raise_for_status()
                return AuthorizationToken.create(response.json()["token"])

            except httpx.TimeoutException as e:
                raise AuthorizationError(f"Bank API timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise AuthorizationError(f"Authorization rejected: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise AuthorizationError(f"Bank API unreachable: {e}") from e
            except (KeyError, ValueError, TypeError) as e:
                raise AuthorizationError(f"Invalid authorization response from bank: {e}") from e

    def charge(self, token: AuthorizationToken, amount: Money) -> None:
        """
        Debit the authorized account. No retry: a failed charge is final.

        Raises:
            AccountError: On insufficient funds, timeout, or HTTP errors
        """
        with self._client() as client:
            try:
                response = client.post(
                    "/bank/charge",
                    json={
                        "token": token.value,
                        "amount": amount.amount,
                        "currency": amount.currency,
                    },
                )
                response.raise_for_status()

            except httpx.TimeoutException as e:
                raise AccountError(f"Bank API timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise AccountError(f"Charge rejected: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise AccountError(f"Bank API unreachable: {e}") from e
