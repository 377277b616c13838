import random

import pytest

from splitbill.db.models import Expense, Group, Settlement
from splitbill.services.balances import compute_balances, split_amount
from splitbill.services.engine import compute_settlements


def make_ledger(seed: int) -> tuple[list[Expense], tuple[str, ...]]:
    rng = random.Random(seed)
    roster = tuple(f"m{i}" for i in range(rng.randint(2, 8)))
    group = Group.create("g", roster)
    expenses = [
        Expense.create(group, f"e{i}", rng.choice(roster), rng.randint(1, 50_000))
        for i in range(rng.randint(0, 25))
    ]
    return expenses, roster


def test_scenario_two_members():
    group = Group.create("g", ["A", "B"])
    expenses = [Expense.create(group, "ランチ", "A", 1000)]

    assert compute_balances(expenses, group.members) == {"A": 500, "B": -500}
    assert compute_settlements(expenses, group.members) == [
        Settlement(from_member="B", to_member="A", amount=500),
    ]


def test_scenario_japanese_names():
    group = Group.create("group2", ["太郎", "花子"])
    expenses = [Expense.create(group, "ディナー", "太郎", 3000)]

    settlements = compute_settlements(expenses, group.members)

    assert [s.to_dict() for s in settlements] == [{"from": "花子", "to": "太郎", "amount": 1500}]


def test_scenario_three_members_with_remainder():
    group = Group.create("g", ["A", "B", "C"])
    expenses = [Expense.create(group, "支出1", "A", 2000)]

    assert compute_balances(expenses, group.members) == {"A": 1332, "B": -666, "C": -666}
    assert compute_settlements(expenses, group.members) == [
        Settlement(from_member="B", to_member="A", amount=666),
        Settlement(from_member="C", to_member="A", amount=666),
    ]


def test_scenario_offsetting_expenses():
    group = Group.create("g", ["A", "B"])
    expenses = [Expense.create(group, "x", "A", 1000), Expense.create(group, "y", "B", 1000)]

    assert compute_balances(expenses, group.members) == {"A": 0, "B": 0}
    assert compute_settlements(expenses, group.members) == []


def test_single_unit_amount_needs_no_settlement():
    group = Group.create("g", ["A", "B", "C"])
    expenses = [Expense.create(group, "飴", "A", 1)]

    assert compute_balances(expenses, group.members) == {"A": 0, "B": 0, "C": 0}
    assert compute_settlements(expenses, group.members) == []


@pytest.mark.parametrize("seed", range(30))
def test_ledger_properties(seed: int):
    expenses, roster = make_ledger(seed)

    balances = compute_balances(expenses, roster)
    settlements = compute_settlements(expenses, roster)

    assert sum(balances.values()) == 0

    net = {member: 0 for member in roster}
    for s in settlements:
        assert s.from_member != s.to_member
        assert s.amount > 0
        net[s.to_member] += s.amount
        net[s.from_member] -= s.amount
    assert net == balances

    nonzero = sum(1 for value in balances.values() if value != 0)
    assert len(settlements) <= max(nonzero - 1, 0)

    assert compute_settlements(list(expenses), roster) == settlements


def per_expense_balances(expenses: list[Expense], roster: tuple[str, ...]) -> dict[str, int]:
    balances = {member: 0 for member in roster}
    for expense in expenses:
        for member, consumed in split_amount(expense.amount, roster, expense.payer).items():
            balances[member] -= consumed
        balances[expense.payer] += expense.amount
    return balances


@pytest.mark.parametrize("seed", range(30))
def test_compute_balances_matches_per_expense_split(seed: int):
    expenses, roster = make_ledger(seed)
    assert compute_balances(expenses, roster) == per_expense_balances(expenses, roster)


def test_compute_balances_large_roster():
    roster = tuple(f"m{i}" for i in range(2000))
    group = Group(name="g", members=roster)
    expenses = [Expense.create(group, f"e{i}", roster[i % 7], 1_000 + i) for i in range(300)]

    balances = compute_balances(expenses, roster)

    assert sum(balances.values()) == 0
    assert balances == per_expense_balances(expenses, roster)
