import dataclasses

import pytest

from splitbill.db.models import Expense, Group, Settlement
from splitbill.errors import PayerNotInRosterError, ValidationError


def test_group_create_strips_and_keeps_order():
    group = Group.create(" テストグループ1 ", ["一郎", " 二郎", "三郎 "])
    assert group == Group(name="テストグループ1", members=("一郎", "二郎", "三郎"))


@pytest.mark.parametrize(
    "name, members, message",
    [
        ("", ["Alice", "Bob"], "グループ名は必須です"),
        ("g", ["Alice"], "メンバーは2人以上必要です"),
        ("g", ["Alice", "Alice"], "メンバー名が重複しています"),
        ("g", ["Alice", " "], "メンバー名は必須です"),
        ("あ" * 17, ["Alice", "Bob"], "グループ名が長すぎます"),
    ],
)
def test_group_create_rejects_invalid(name, members, message):
    with pytest.raises(ValidationError) as exc_info:
        Group.create(name, members)
    assert message in exc_info.value.messages


def test_expense_create():
    group = Group.create("g", ["一郎", "二郎"])
    expense = Expense.create(group, "ディナー", "一郎", 10000)
    assert expense == Expense(group_name="g", label="ディナー", payer="一郎", amount=10000)


def test_expense_is_immutable():
    expense = Expense(group_name="g", label="x", payer="A", amount=1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        expense.amount = 2  # type: ignore[misc]


def test_expense_create_unknown_payer():
    group = Group.create("g", ["一郎", "二郎", "三郎"])
    with pytest.raises(PayerNotInRosterError) as exc_info:
        Expense.create(group, "支出1", "四郎", 2000)
    assert exc_info.value.message == "支払い者がメンバーの中にいません"


@pytest.mark.parametrize("amount", [0, -5, 1.5, True, "100"])
def test_expense_rejects_non_positive_or_non_integer_amount(amount):
    group = Group.create("g", ["A", "B"])
    with pytest.raises(ValidationError) as exc_info:
        Expense.create(group, "x", "A", amount)
    assert exc_info.value.messages == ["金額は1円以上の整数です"]


def test_expense_create_collects_all_field_errors():
    group = Group.create("g", ["A", "B"])
    with pytest.raises(ValidationError) as exc_info:
        Expense.create(group, "", "", 0)
    assert exc_info.value.messages == ["支出名は必須です", "支払うメンバーは必須です", "金額は1円以上の整数です"]


def test_settlement_rejects_self_transfer_and_non_positive_amount():
    with pytest.raises(ValueError):
        Settlement(from_member="A", to_member="A", amount=10)
    with pytest.raises(ValueError):
        Settlement(from_member="A", to_member="B", amount=0)


def test_settlement_to_dict():
    settlement = Settlement(from_member="花子", to_member="太郎", amount=1500)
    assert settlement.to_dict() == {"from": "花子", "to": "太郎", "amount": 1500}
