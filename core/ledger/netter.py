"""
채무 상계기

같은 두 구성원 사이의 양방향 채무를 하나의 순방향 간선으로 줄임.
쌍 단위 상계만 수행하며 A→B→C→A 같은 순환은 제거하지 않음.
"""

import logging
from decimal import Decimal

from core.constants import Defaults
from core.ledger.models import DebtEdge, RawDebtGraph

logger = logging.getLogger(__name__)


class DebtNetter:
    """쌍 단위 채무 상계

    비순서 쌍 {A, B}에 대해 net = (A→B) - (B→A):
    - net > ε  : A→B = net
    - net < -ε : B→A = -net
    - 그 외    : 간선 없음 (균형)

    Args:
        tolerance: ε (기본 0.01)
    """

    def __init__(self, tolerance: Decimal = Defaults.TOLERANCE):
        self.tolerance = tolerance

    def net(self, graph: RawDebtGraph) -> list[DebtEdge]:
        """상계 후 송금 목록

        Returns:
            금액 > 0인 간선 목록 ((from, to) 정렬, 쌍당 최대 1개)
        """
        edges: list[DebtEdge] = []

        for a, b in graph.pairs():
            net_amount = graph.get(a, b) - graph.get(b, a)

            if net_amount > self.tolerance:
                edges.append(DebtEdge(from_member=a, to_member=b, amount=net_amount))
            elif net_amount < -self.tolerance:
                edges.append(DebtEdge(from_member=b, to_member=a, amount=-net_amount))

        edges.sort(key=lambda e: (e.from_member, e.to_member))

        logger.debug(f"Debts netted: pairs={len(graph.pairs())} transfers={len(edges)}")
        return edges
