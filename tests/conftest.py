from typing import Optional

import pytest

from splitbill.db.models import Expense, Group
from splitbill.errors import GroupAlreadyExistsError


class StubRepo:
    def __init__(self, groups: list[Group], expenses: list[Expense]) -> None:
        self.groups = list(groups)
        self.expenses = list(expenses)
        self.saved_groups: list[Group] = []
        self.saved_expenses: list[Expense] = []
        # get_group からは見えないが INSERT 時に一意制約に当たる名前
        self.names_taken_on_save: set[str] = set()

    async def load_groups(self) -> list[Group]:
        return list(self.groups)

    async def get_group(self, name: str) -> Optional[Group]:
        return next((group for group in self.groups if group.name == name), None)

    async def save_group(self, group: Group) -> None:
        if group.name in self.names_taken_on_save:
            raise GroupAlreadyExistsError(group.name)
        self.saved_groups.append(group)
        self.groups.append(group)

    async def load_expenses(self, group_name: str) -> list[Expense]:
        return [expense for expense in self.expenses if expense.group_name == group_name]

    async def save_expense(self, expense: Expense) -> None:
        self.saved_expenses.append(expense)
        self.expenses.append(expense)


@pytest.fixture
def repo() -> StubRepo:
    groups = [
        Group(name="テストグループ1", members=("一郎", "二郎", "三郎")),
        Group(name="テストグループ2", members=("太郎", "花子")),
    ]
    expenses = [
        Expense(group_name="テストグループ1", label="ランチ", payer="一郎", amount=1000),
        Expense(group_name="テストグループ2", label="ディナー", payer="太郎", amount=3000),
    ]
    return StubRepo(groups, expenses)
