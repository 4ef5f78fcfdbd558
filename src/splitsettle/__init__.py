from splitsettle.models import CurrencyUnit, Debt, Participant, Transaction
from splitsettle.services.balances import CurrencyOverflowError, aggregate_balances
from splitsettle.services.settlement import UnbalancedLedgerError, apply_debts, minimize_debts, simplify
from splitsettle.services.split import split_evenly

__all__ = [
    "CurrencyOverflowError",
    "CurrencyUnit",
    "Debt",
    "Participant",
    "Transaction",
    "UnbalancedLedgerError",
    "aggregate_balances",
    "apply_debts",
    "minimize_debts",
    "simplify",
    "split_evenly",
]
