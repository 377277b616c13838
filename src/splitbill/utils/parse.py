from __future__ import annotations

import re

MEMBER_SEPARATORS = re.compile(r"[,、，]")


def split_args(text: str, command: str) -> list[str]:
    """``/cmd a | b | c`` を ``["a", "b", "c"]`` に分解する。"""
    body = text.split(maxsplit=1)
    if len(body) < 2:
        return []
    # /cmd@botname の形式でも受け付ける
    if body[0].lstrip("/").split("@")[0] != command.lstrip("/"):
        return []
    return [part.strip() for part in body[1].split("|")]


def parse_members(value: str) -> list[str]:
    return [member.strip() for member in MEMBER_SEPARATORS.split(value) if member.strip()]


def parse_amount(value: str) -> int:
    cleaned = value.strip().replace(",", "").replace("，", "")
    cleaned = cleaned.removesuffix("円").strip()
    if not re.fullmatch(r"\d+", cleaned):
        raise ValueError("金額は1円以上の整数です")
    amount = int(cleaned)
    if amount < 1:
        raise ValueError("金額は1円以上の整数です")
    return amount
