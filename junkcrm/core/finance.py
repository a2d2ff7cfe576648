from decimal import Decimal
from typing import Dict, Iterable, Union

from junkcrm.models.base import money
from junkcrm.models.transaction import Transaction, TransactionType


def summarize_transactions(rows: Iterable[Transaction]) -> Dict[str, Union[str, int]]:
    """Revenue, expense and profit totals over a set of transactions."""
    income = Decimal("0")
    expenses = Decimal("0")
    count = 0
    for row in rows:
        count += 1
        if row.type == TransactionType.income:
            income += Decimal(row.amount)
        else:
            expenses += Decimal(row.amount)
    return {
        "income": money(income),
        "expenses": money(expenses),
        "profit": money(income - expenses),
        "count": count,
    }
