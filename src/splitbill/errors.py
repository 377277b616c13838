from __future__ import annotations

from typing import Sequence


class SplitBillError(Exception):
    """SplitBill の基底例外。``message`` はそのままユーザーに表示される。"""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class EmptyRosterError(SplitBillError):
    def __init__(self) -> None:
        super().__init__("メンバーがいません")


class DuplicateMemberError(SplitBillError):
    def __init__(self, member: str) -> None:
        super().__init__(f"メンバー名が重複しています: {member}")
        self.member = member


class PayerNotInRosterError(SplitBillError):
    def __init__(self, payer: str) -> None:
        super().__init__("支払い者がメンバーの中にいません")
        self.payer = payer


class ImbalancedLedgerError(SplitBillError):
    def __init__(self, residual: int) -> None:
        super().__init__(f"残高の合計が0になりません (差額: {residual})")
        self.residual = residual


class ValidationError(SplitBillError):
    def __init__(self, messages: Sequence[str]) -> None:
        super().__init__("\n".join(messages))
        self.messages = list(messages)


class GroupNotFoundError(SplitBillError):
    def __init__(self, name: str) -> None:
        super().__init__(f"グループ： {name} が存在しません")
        self.name = name


class GroupAlreadyExistsError(SplitBillError):
    def __init__(self, name: str) -> None:
        super().__init__("同じ名前のグループが登録されています")
        self.name = name
