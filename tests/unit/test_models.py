"""Unit tests for value objects and the cash deposit"""

import pytest
from atm_gateway.domain.models import (
    DEFAULT_CURRENCY,
    AuthorizationToken,
    Banknote,
    BanknotesPack,
    Card,
    Money,
    MoneyDeposit,
    PinCode,
    Withdrawal,
)


def test_banknote_catalog_descending():
    values = [note.value for note in Banknote.descending()]

    assert values == [500, 200, 100, 50, 20, 10]


def test_banknote_from_value():
    assert Banknote.from_value(50) is Banknote.PL_50

    with pytest.raises(ValueError):
        Banknote.from_value(30)


def test_money_defaults_to_machine_currency():
    assert Money(70) == Money(70, DEFAULT_CURRENCY)
    assert DEFAULT_CURRENCY == "PLN"


@pytest.mark.parametrize("amount", [-1, 1.5, "70", True])
def test_money_rejects_invalid_amount(amount):
    with pytest.raises(ValueError):
        Money(amount)


@pytest.mark.parametrize("currency", ["pln", "PL", "EURO", ""])
def test_money_rejects_invalid_currency(currency):
    with pytest.raises(ValueError):
        Money(10, currency)


def test_pin_code_create():
    pin = PinCode.create_pin(0, 0, 7, 9)

    assert pin.pin == "0079"
    assert "0079" not in repr(pin)


@pytest.mark.parametrize("digits", [(1, 2, 3, 10), (1, 2, 3, -1), (1, 2, 3, 1.0)])
def test_pin_code_rejects_bad_digits(digits):
    with pytest.raises(ValueError):
        PinCode.create_pin(*digits)


def test_pin_code_from_string():
    assert PinCode.from_string("0123") == PinCode.create_pin(0, 1, 2, 3)

    for raw in ["123", "12345", "12a4", ""]:
        with pytest.raises(ValueError):
            PinCode.from_string(raw)


def test_card_masked():
    card = Card.create("4111222233334444")

    assert card.number == "4111222233334444"
    assert card.masked() == "************4444"

    with pytest.raises(ValueError):
        Card.create("   ")


def test_authorization_token_not_blank():
    assert AuthorizationToken.create("token").value == "token"

    with pytest.raises(ValueError):
        AuthorizationToken.create("")


def test_banknotes_pack_rejects_negative_count():
    with pytest.raises(ValueError):
        BanknotesPack.create(-1, Banknote.PL_10)


def test_deposit_orders_packs_and_drops_empty_ones():
    deposit = MoneyDeposit.create(
        DEFAULT_CURRENCY,
        [
            BanknotesPack.create(4, Banknote.PL_10),
            BanknotesPack.create(0, Banknote.PL_100),
            BanknotesPack.create(3, Banknote.PL_50),
        ],
    )

    assert [p.banknote for p in deposit.packs] == [Banknote.PL_50, Banknote.PL_10]
    assert deposit.available() == {Banknote.PL_50: 3, Banknote.PL_10: 4}
    assert deposit.total == 190


def test_deposit_rejects_duplicate_denomination():
    with pytest.raises(ValueError):
        MoneyDeposit.create(
            DEFAULT_CURRENCY,
            [BanknotesPack.create(1, Banknote.PL_20), BanknotesPack.create(2, Banknote.PL_20)],
        )


def test_deposit_available_is_a_copy():
    deposit = MoneyDeposit.create(DEFAULT_CURRENCY, [BanknotesPack.create(1, Banknote.PL_20)])

    deposit.available()[Banknote.PL_20] = 99

    assert deposit.available() == {Banknote.PL_20: 1}


def test_withdrawal_total():
    withdrawal = Withdrawal(banknotes=(Banknote.PL_50, Banknote.PL_20))

    assert withdrawal.total == 70
