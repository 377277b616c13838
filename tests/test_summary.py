from splitbill.db.models import Expense, Group, Settlement
from splitbill.services.summary import (
    format_amount,
    format_balances,
    format_expenses,
    format_group,
    format_settlements,
)


def test_format_amount():
    assert format_amount(12000, "JPY") == "12,000円"
    assert format_amount(-500, "jpy") == "-500円"
    assert format_amount(1500, "EUR") == "1,500 EUR"


def test_format_group_escapes_html():
    text = format_group(Group(name="A&B", members=("<太郎>", "花子")))
    assert "A&amp;B" in text
    assert "&lt;太郎&gt;" in text


def test_format_balances():
    text = format_balances({"太郎": 1500, "花子": -1500, "次郎": 0}, "JPY")
    assert text.splitlines() == ["残高:", "• 太郎: +1,500円", "• 花子: -1,500円", "• 次郎: 0円"]


def test_format_expenses_empty():
    assert "まだ支出はありません" in format_expenses([], "JPY")


def test_format_expenses():
    text = format_expenses([Expense(group_name="g", label="ディナー", payer="太郎", amount=3000)], "JPY")
    assert "ディナー — 3,000円 (太郎 が支払い)" in text


def test_format_settlements():
    text = format_settlements([Settlement(from_member="花子", to_member="太郎", amount=1500)], "JPY")
    assert "• 花子 → 太郎: 1,500円" in text
    assert "精算の必要はありません" in format_settlements([], "JPY")
