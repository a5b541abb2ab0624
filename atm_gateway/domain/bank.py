"""Bank collaborator contract consumed by the withdrawal engine"""

from typing import Protocol
from atm_gateway.domain.models import AuthorizationToken, Money


class Bank(Protocol):
    """
    Authorization and ledger service behind the machine.

    Implementations signal failures with exceptions:
    - authorize: AuthorizationError for invalid credentials or unknown card
    - charge: AccountError when the account cannot be debited
    """

    def authorize(self, pin: str, card_number: str) -> AuthorizationToken:
        ...

    def charge(self, token: AuthorizationToken, amount: Money) -> None:
        ...
