"""
원장 집계기

그룹의 전체 지출(몫 포함)과 정산 목록 → 상계 전 방향성 채무 그래프.
조회할 때마다 전체 사실로부터 다시 계산 (증분 유지 없음).
"""

import logging
from typing import Iterable

from core.ledger.models import Expense, ExpenseShare, Member, RawDebtGraph, Settlement

logger = logging.getLogger(__name__)


class LedgerAggregator:
    """지출 몫과 정산을 채무 그래프로 접기

    1. 미정산 몫 (결제자 본인 몫 제외): 몫 구성원 → 결제자 간선에 가산
    2. 정산: from → to 간선에서 차감 (0 미만 허용 = 초과 정산)

    Decimal 합은 교환법칙이 정확히 성립하므로 입력 순서와 무관하게
    같은 사실 집합은 항상 같은 그래프를 만든다.
    """

    def aggregate(
        self,
        members: Iterable[Member],
        expenses: Iterable[Expense],
        settlements: Iterable[Settlement],
    ) -> RawDebtGraph:
        """채무 그래프 생성

        Args:
            members: 그룹 구성원 (채무가 없는 구성원도 그래프에 포함)
            expenses: 몫이 계산된 지출 목록
            settlements: 정산 목록

        Returns:
            0/음수 간선을 포함한 RawDebtGraph
        """
        graph = RawDebtGraph(member_ids=frozenset(m.member_id for m in members))

        share_count = 0
        for expense in expenses:
            for share in expense.shares:
                if share.member_id == expense.paid_by or share.settled:
                    continue
                graph.add(share.member_id, expense.paid_by, share.amount)
                share_count += 1

        settlement_count = 0
        for settlement in settlements:
            graph.subtract(settlement.from_member, settlement.to_member, settlement.amount)
            settlement_count += 1

        logger.debug(
            f"Debt graph aggregated: members={len(graph.member_ids)} "
            f"open_shares={share_count} settlements={settlement_count} edges={len(graph)}"
        )
        return graph


def unsettled_shares_for(member_id: str, expenses: Iterable[Expense]) -> list[ExpenseShare]:
    """구성원이 다른 결제자에게 아직 갚지 않은 몫 목록

    Args:
        member_id: 구성원 ID
        expenses: 지출 목록

    Returns:
        결제자가 본인이 아니고 settled=False인 몫
    """
    return [
        share
        for expense in expenses
        if expense.paid_by != member_id
        for share in expense.shares
        if share.member_id == member_id and not share.settled
    ]
