from __future__ import annotations

from typing import List, Sequence

from splitbill.db.models import Settlement
from splitbill.services.balances import ExpenseLike, compute_balances
from splitbill.services.settlement import settle


def compute_settlements(expenses: Sequence[ExpenseLike], roster: Sequence[str]) -> List[Settlement]:
    return settle(compute_balances(expenses, roster))
