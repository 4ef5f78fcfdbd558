from __future__ import annotations

import heapq
from typing import Hashable, Iterable, List, Mapping, Sequence

from splitsettle.logging import get_logger
from splitsettle.models import CurrencyUnit, Debt, Transaction
from splitsettle.services.balances import aggregate_balances


class UnbalancedLedgerError(ValueError):
    def __init__(self, total: int) -> None:
        super().__init__(f"balances must sum to zero, got {total}")
        self.total = total


def minimize_debts(balances: Mapping[Hashable, CurrencyUnit]) -> List[Debt]:
    """
    Settle balances by repeatedly matching the largest debtor with the largest creditor.

    Each step emits one debt and fully settles at least one side, so ``n``
    nonzero balances produce at most ``n - 1`` debts. Among equal balances the
    participant that sorts first is picked.
    """
    total = sum(balances.values())
    if total != 0:
        raise UnbalancedLedgerError(total)

    # debtors: most negative first; creditors: most positive first
    debtors: list[tuple[int, Hashable]] = []
    creditors: list[tuple[int, Hashable]] = []

    for participant, balance in balances.items():
        if balance < 0:
            debtors.append((balance, participant))
        elif balance > 0:
            creditors.append((-balance, participant))

    heapq.heapify(debtors)
    heapq.heapify(creditors)

    log = get_logger(__name__)
    debts: list[Debt] = []

    while debtors and creditors:
        min_balance, owing = heapq.heappop(debtors)
        neg_max_balance, owed = heapq.heappop(creditors)
        max_balance = -neg_max_balance

        amount = min(-min_balance, max_balance)
        debts.append(Debt(amount=amount, owing=owing, owed=owed))
        log.debug("settlement.debt", owing=str(owing), owed=str(owed), amount=amount)

        residual = min_balance + max_balance
        if residual < 0:
            heapq.heappush(debtors, (residual, owing))
        elif residual > 0:
            heapq.heappush(creditors, (-residual, owed))

    log.info("settlement.done", participants=len(balances), debts=len(debts))
    return debts


def simplify(transactions: Sequence[Transaction], limit: int | None = None) -> List[Debt]:
    return minimize_debts(aggregate_balances(transactions, limit))


def apply_debts(
    balances: Mapping[Hashable, CurrencyUnit],
    debts: Iterable[Debt],
) -> dict[Hashable, CurrencyUnit]:
    result = dict(balances)
    for debt in debts:
        result[debt.owing] = result.get(debt.owing, 0) + debt.amount
        result[debt.owed] = result.get(debt.owed, 0) - debt.amount
    return result
