from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Tuple

CurrencyUnit = int


@dataclass(frozen=True, slots=True, order=True)
class Participant:
    name: str

    def __str__(self) -> str:
        return self.name


Share = Tuple[Hashable, CurrencyUnit]


def _check_amount(amount: object) -> None:
    # bool is an int subclass but never a meaningful amount
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise TypeError(f"amount must be an int in the smallest currency unit, got {type(amount).__name__}")


@dataclass(frozen=True, slots=True)
class Transaction:
    """One payment: ``paid_by`` paid the sum of ``split_by`` on behalf of the listed sharers."""

    paid_by: Hashable
    split_by: Tuple[Share, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        shares = tuple((participant, amount) for participant, amount in self.split_by)
        for _, amount in shares:
            _check_amount(amount)
        object.__setattr__(self, "split_by", shares)

    @property
    def total(self) -> CurrencyUnit:
        return sum(amount for _, amount in self.split_by)


@dataclass(frozen=True, slots=True)
class Debt:
    amount: CurrencyUnit
    owing: Hashable
    owed: Hashable
