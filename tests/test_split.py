import pytest

from splitsettle.models import Debt, Transaction
from splitsettle.services.settlement import simplify
from splitsettle.services.split import split_amount, split_evenly


def test_split_amount_even():
    shares = split_amount(1000, [1, 2, 3, 4])
    assert shares == {1: 250, 2: 250, 3: 250, 4: 250}


def test_split_amount_remainder():
    shares = split_amount(1001, [1, 2, 3])
    assert sum(shares.values()) == 1001
    assert sorted(shares.values()) == [333, 334, 334]


def test_split_amount_remainder_goes_to_first_participants():
    shares = split_amount(1002, [1, 2, 3, 4])
    assert shares == {1: 251, 2: 251, 3: 250, 4: 250}


def test_split_amount_beyond_decimal_precision():
    amount = 10**30 + 1
    shares = split_amount(amount, [1, 2, 3])
    assert sum(shares.values()) == amount
    assert shares[1] == shares[2] == shares[3] + 1


def test_split_amount_repeated_participant():
    shares = split_amount(90, ["a", "b", "a"])
    assert shares == {"a": 60, "b": 30}


@pytest.mark.parametrize("amount, participants", [(-1, [1]), (100, [])])
def test_split_amount_invalid(amount, participants):
    with pytest.raises(ValueError):
        split_amount(amount, participants)


def test_split_evenly_builds_transaction(people):
    a, b, c = people["A"], people["B"], people["C"]

    transaction = split_evenly(a, 3000, [a, b, c])

    assert isinstance(transaction, Transaction)
    assert transaction.paid_by == a
    assert transaction.total == 3000
    assert simplify([transaction]) == [Debt(1000, b, a), Debt(1000, c, a)]
