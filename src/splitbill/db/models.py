from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from splitbill.errors import PayerNotInRosterError, ValidationError
from splitbill.services.validation import is_valid_amount, validate_expense, validate_group

Member = str


@dataclass(slots=True, frozen=True)
class Group:
    name: str
    members: tuple[Member, ...]

    @classmethod
    def create(cls, name: str, members: Iterable[str]) -> Group:
        members = list(members)
        errors = validate_group(name, members)
        if errors:
            raise ValidationError(errors)
        return cls(name=name.strip(), members=tuple(member.strip() for member in members))

    def has_member(self, member: Member) -> bool:
        return member in self.members


@dataclass(slots=True, frozen=True)
class Expense:
    group_name: str
    label: str
    payer: Member
    amount: int

    def __post_init__(self) -> None:
        if not is_valid_amount(self.amount):
            raise ValidationError(["金額は1円以上の整数です"])

    @classmethod
    def create(cls, group: Group, label: str, payer: str, amount: int) -> Expense:
        errors = validate_expense(group.name, label, payer, amount)
        if errors:
            raise ValidationError(errors)
        payer = payer.strip()
        if not group.has_member(payer):
            raise PayerNotInRosterError(payer)
        return cls(group_name=group.name, label=label.strip(), payer=payer, amount=amount)


@dataclass(slots=True, frozen=True)
class Settlement:
    from_member: Member
    to_member: Member
    amount: int

    def __post_init__(self) -> None:
        if self.from_member == self.to_member:
            raise ValueError("settlement must be between two different members")
        if self.amount <= 0:
            raise ValueError("settlement amount must be positive")

    def to_dict(self) -> dict[str, object]:
        return {"from": self.from_member, "to": self.to_member, "amount": self.amount}
