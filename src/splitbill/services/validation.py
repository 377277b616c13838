from __future__ import annotations

from typing import Any, Sequence

MIN_MEMBERS = 2
# callback_data (64バイト上限) に "summary:" などの接頭辞付きで載せる
MAX_GROUP_NAME_BYTES = 48


def validate_group(name: str, members: Sequence[str]) -> list[str]:
    errors: list[str] = []
    if not name or not name.strip():
        errors.append("グループ名は必須です")
    elif len(name.strip().encode("utf-8")) > MAX_GROUP_NAME_BYTES:
        errors.append("グループ名が長すぎます")

    cleaned = [member.strip() for member in members]
    if len(cleaned) < MIN_MEMBERS:
        errors.append("メンバーは2人以上必要です")
    if any(not member for member in cleaned):
        errors.append("メンバー名は必須です")
    if len(set(cleaned)) != len(cleaned):
        errors.append("メンバー名が重複しています")
    return errors


def is_valid_amount(amount: Any) -> bool:
    # bool は int のサブクラスなので明示的に弾く
    return isinstance(amount, int) and not isinstance(amount, bool) and amount >= 1


def validate_expense(group_name: str, label: str, payer: str, amount: Any) -> list[str]:
    errors: list[str] = []
    if not group_name or not group_name.strip():
        errors.append("グループ名は必須です")
    if not label or not label.strip():
        errors.append("支出名は必須です")
    if not payer or not payer.strip():
        errors.append("支払うメンバーは必須です")
    if not is_valid_amount(amount):
        errors.append("金額は1円以上の整数です")
    return errors
