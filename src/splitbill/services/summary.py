from __future__ import annotations

from html import escape
from typing import Iterable, Mapping

from splitbill.db.models import Expense, Group, Settlement


def format_amount(amount: int, currency: str) -> str:
    if currency.upper() == "JPY":
        return f"{amount:,}円"
    return f"{amount:,} {currency}"


def format_group(group: Group) -> str:
    lines = [f"👥 <b>{escape(group.name)}</b>", "メンバー:"]
    for member in group.members:
        lines.append(f"• {escape(member)}")
    return "\n".join(lines)


def format_balances(balances: Mapping[str, int], currency: str) -> str:
    lines = ["残高:"]
    for member, balance in balances.items():
        sign = "+" if balance > 0 else ""
        lines.append(f"• {escape(member)}: {sign}{format_amount(balance, currency)}")
    return "\n".join(lines)


def format_expenses(expenses: Iterable[Expense], currency: str) -> str:
    lines = ["\n支出:"]
    rendered = [
        f"• {escape(exp.label)} — {format_amount(exp.amount, currency)} ({escape(exp.payer)} が支払い)"
        for exp in expenses
    ]
    if not rendered:
        lines.append("• まだ支出はありません")
    lines.extend(rendered)
    return "\n".join(lines)


def format_settlements(settlements: Iterable[Settlement], currency: str) -> str:
    lines = ["精算方法:"]
    rendered = [
        f"• {escape(s.from_member)} → {escape(s.to_member)}: {format_amount(s.amount, currency)}"
        for s in settlements
    ]
    if not rendered:
        lines.append("• 精算の必要はありません")
    lines.extend(rendered)
    return "\n".join(lines)
