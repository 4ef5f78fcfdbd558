from __future__ import annotations

from typing import Hashable, Sequence

from splitsettle.models import CurrencyUnit, Transaction


def split_amount(amount: CurrencyUnit, participants: Sequence[Hashable]) -> dict[Hashable, CurrencyUnit]:
    """Equal integer shares of ``amount``; the first ``amount % n`` participants carry one extra unit."""
    if amount < 0:
        raise ValueError("amount must be non-negative")
    if not participants:
        raise ValueError("participants must not be empty")

    base_share, remainder = divmod(amount, len(participants))

    result: dict[Hashable, CurrencyUnit] = {}
    for idx, participant in enumerate(participants):
        share = base_share + 1 if idx < remainder else base_share
        result[participant] = result.get(participant, 0) + share
    return result


def split_evenly(paid_by: Hashable, amount: CurrencyUnit, participants: Sequence[Hashable]) -> Transaction:
    """Transaction where ``paid_by`` covered ``amount`` shared equally by ``participants``."""
    return Transaction(paid_by=paid_by, split_by=tuple(split_amount(amount, participants).items()))
