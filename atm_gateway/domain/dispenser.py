"""Banknote selection - greedy payout over the machine's deposit"""

from typing import Dict, List, Mapping
from atm_gateway.domain.models import Banknote, MoneyDeposit
from atm_gateway.domain.exceptions import UnsatisfiableAmountError


def plan_withdrawal(amount: int, available: Mapping[Banknote, int]) -> Dict[Banknote, int]:
    """
    Pick banknote counts summing exactly to amount.

    Single greedy pass in catalog order (highest face value first), taking
    min(available, remaining // face value) of each denomination. There is no
    backtracking: an amount that only a non-greedy combination could pay
    (e.g. 60 from one 50 and three 20s) is reported as unsatisfiable.

    Raises:
        UnsatisfiableAmountError: if anything remains after the pass
    """
    remaining = amount
    plan: Dict[Banknote, int] = {}

    for note in Banknote.descending():
        count = min(available.get(note, 0), remaining // note.value)
        if count > 0:
            plan[note] = count
            remaining -= count * note.value

    if remaining > 0:
        raise UnsatisfiableAmountError(amount, remaining)

    return plan


def dispense(amount: int, deposit: MoneyDeposit) -> List[Banknote]:
    """
    Banknotes to hand out for amount, highest denomination first.

    The deposit is only read; counts are not decremented.
    """
    plan = plan_withdrawal(amount, deposit.available())

    banknotes: List[Banknote] = []
    for note in Banknote.descending():
        banknotes.extend([note] * plan.get(note, 0))
    return banknotes
