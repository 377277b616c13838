from __future__ import annotations

import heapq
from typing import List, Mapping

from splitbill.db.models import Settlement
from splitbill.errors import ImbalancedLedgerError


def settle(balances: Mapping[str, int]) -> List[Settlement]:
    """最大の債権者と最大の債務者を貪欲に組み合わせて送金リストを作る。

    ヒープの要素は ``(-amount, position, member)``。``position`` は ``balances``
    上の順序 (メンバー登録順) で、金額が同じ場合はこれが小さい方を優先する。
    """
    creditors: list[tuple[int, int, str]] = []
    debtors: list[tuple[int, int, str]] = []

    for position, (member, balance) in enumerate(balances.items()):
        if balance > 0:
            creditors.append((-balance, position, member))
        elif balance < 0:
            debtors.append((balance, position, member))

    heapq.heapify(creditors)
    heapq.heapify(debtors)

    transfers: list[Settlement] = []
    while creditors and debtors:
        neg_credit, cred_pos, creditor = heapq.heappop(creditors)
        neg_debt, debt_pos, debtor = heapq.heappop(debtors)
        credit, debt = -neg_credit, -neg_debt

        amount = min(credit, debt)
        transfers.append(Settlement(from_member=debtor, to_member=creditor, amount=amount))

        if credit > amount:
            heapq.heappush(creditors, (amount - credit, cred_pos, creditor))
        if debt > amount:
            heapq.heappush(debtors, (amount - debt, debt_pos, debtor))

    if creditors or debtors:
        residual = -sum(entry[0] for entry in creditors) + sum(entry[0] for entry in debtors)
        raise ImbalancedLedgerError(residual)

    return transfers
