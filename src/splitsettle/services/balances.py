from __future__ import annotations

from typing import Hashable, Iterable, Mapping, Sequence

from splitsettle.config import get_settings
from splitsettle.logging import get_logger
from splitsettle.models import CurrencyUnit, Transaction


class CurrencyOverflowError(ArithmeticError):
    def __init__(self, participant: Hashable, amount: int, limit: int) -> None:
        super().__init__(f"amount {amount} for {participant} exceeds the limit of {limit}")
        self.participant = participant
        self.amount = amount
        self.limit = limit


def _check_limit(participant: Hashable, amount: int, limit: int) -> None:
    if not -limit - 1 <= amount <= limit:
        raise CurrencyOverflowError(participant, amount, limit)


def transaction_balances(transaction: Transaction, limit: int | None = None) -> dict[Hashable, CurrencyUnit]:
    """Net effect of a single transaction: the payer is credited the total, each sharer debited their share."""
    if limit is None:
        limit = get_settings().max_amount

    total = transaction.total
    _check_limit(transaction.paid_by, total, limit)

    result: dict[Hashable, CurrencyUnit] = {transaction.paid_by: total}
    for participant, amount in transaction.split_by:
        result[participant] = result.get(participant, 0) - amount
    return result


def merge_balances(
    contributions: Iterable[Mapping[Hashable, CurrencyUnit]],
    limit: int | None = None,
) -> dict[Hashable, CurrencyUnit]:
    if limit is None:
        limit = get_settings().max_amount

    result: dict[Hashable, CurrencyUnit] = {}
    for contribution in contributions:
        for participant, amount in contribution.items():
            balance = result.get(participant, 0) + amount
            _check_limit(participant, balance, limit)
            result[participant] = balance
    return result


def aggregate_balances(
    transactions: Sequence[Transaction],
    limit: int | None = None,
) -> dict[Hashable, CurrencyUnit]:
    """
    Reduce transactions to one net balance per participant.

    Positive balances are owed money, negative balances owe it. Participants
    that net to exactly zero are left out. Raises CurrencyOverflowError when a
    transaction total or a running balance exceeds ``limit`` (defaults to
    ``Settings.max_amount``).
    """
    if limit is None:
        limit = get_settings().max_amount

    balances = merge_balances(
        (transaction_balances(transaction, limit) for transaction in transactions),
        limit,
    )
    nonzero = {participant: amount for participant, amount in balances.items() if amount != 0}

    get_logger(__name__).debug(
        "balances.aggregated",
        transactions=len(transactions),
        participants=len(balances),
        nonzero=len(nonzero),
    )
    return nonzero
