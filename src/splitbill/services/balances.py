from __future__ import annotations

from typing import Protocol, Sequence

from splitbill.errors import DuplicateMemberError, EmptyRosterError, PayerNotInRosterError


class ExpenseLike(Protocol):
    payer: str
    amount: int


def split_amount(amount: int, roster: Sequence[str], payer: str) -> dict[str, int]:
    """金額をメンバー全員で均等に割る。割り切れない端数は支払い者が負担する。

    戻り値は各メンバーの負担額で、合計は常に ``amount`` と一致する。
    """
    share, remainder = divmod(amount, len(roster))
    shares = {member: share for member in roster}
    shares[payer] += remainder
    return shares


def _check_roster(roster: Sequence[str]) -> None:
    if not roster:
        raise EmptyRosterError()
    seen: set[str] = set()
    for member in roster:
        if member in seen:
            raise DuplicateMemberError(member)
        seen.add(member)


def compute_balances(expenses: Sequence[ExpenseLike], roster: Sequence[str]) -> dict[str, int]:
    _check_roster(roster)

    n = len(roster)
    balances: dict[str, int] = {member: 0 for member in roster}
    # 均等負担分はまとめて最後に全員から引く。支払い者には端数を除いた額を計上する
    total_share = 0
    for expense in expenses:
        if expense.payer not in balances:
            raise PayerNotInRosterError(expense.payer)
        share, remainder = divmod(expense.amount, n)
        total_share += share
        balances[expense.payer] += expense.amount - remainder

    for member in balances:
        balances[member] -= total_share
    return balances
