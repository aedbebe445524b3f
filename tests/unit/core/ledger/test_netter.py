"""
DebtNetter 테스트

쌍 단위 상계, 역방향 간선 없음, 멱등성, 허용 오차
"""

from decimal import Decimal

import pytest

from core.ledger.aggregator import LedgerAggregator
from core.ledger.models import DebtEdge, RawDebtGraph
from core.ledger.netter import DebtNetter


@pytest.fixture
def netter() -> DebtNetter:
    return DebtNetter()


def _graph(*edges: tuple[str, str, str]) -> RawDebtGraph:
    return RawDebtGraph.from_edges(
        DebtEdge(from_member=a, to_member=b, amount=Decimal(amount)) for a, b, amount in edges
    )


class TestNet:
    """net 테스트"""

    def test_opposite_edges_cancel(self, netter: DebtNetter) -> None:
        """A→B 50, B→A 20 → A→B 30"""
        edges = netter.net(_graph(("alice", "bob", "50"), ("bob", "alice", "20")))

        assert edges == [DebtEdge("alice", "bob", Decimal("30"))]

    def test_reverse_direction(self, netter: DebtNetter) -> None:
        """역방향이 더 크면 방향 전환"""
        edges = netter.net(_graph(("alice", "bob", "10"), ("bob", "alice", "25.50")))

        assert edges == [DebtEdge("bob", "alice", Decimal("15.50"))]

    def test_balanced_pair_dropped(self, netter: DebtNetter) -> None:
        """허용 오차 이내 차이는 간선 없음"""
        edges = netter.net(_graph(("alice", "bob", "10.00"), ("bob", "alice", "9.99")))

        assert edges == []

    def test_negative_edge_from_overpayment(self, netter: DebtNetter) -> None:
        """초과 정산(음수 간선)은 반대 방향 채무"""
        edges = netter.net(_graph(("bob", "alice", "-20")))

        assert edges == [DebtEdge("alice", "bob", Decimal("20"))]

    def test_no_reciprocal_edges(self, netter: DebtNetter) -> None:
        """어떤 쌍도 양방향 간선을 갖지 않음"""
        graph = _graph(
            ("a", "b", "10"), ("b", "a", "3"),
            ("b", "c", "7"), ("c", "b", "8"),
            ("c", "a", "5"), ("a", "c", "1"),
        )

        edges = netter.net(graph)
        keys = {(e.from_member, e.to_member) for e in edges}

        assert all((b, a) not in keys for a, b in keys)
        assert all(e.amount > 0 for e in edges)

    def test_cycles_are_not_cancelled(self, netter: DebtNetter) -> None:
        """A→B→C→A 순환은 그대로 유지 (쌍 단위 상계만)"""
        graph = _graph(("a", "b", "10"), ("b", "c", "10"), ("c", "a", "10"))

        edges = netter.net(graph)

        assert len(edges) == 3

    def test_idempotent(self, netter: DebtNetter) -> None:
        """상계 결과를 다시 상계해도 동일"""
        graph = _graph(
            ("a", "b", "10"), ("b", "a", "3"),
            ("b", "c", "7.25"), ("c", "b", "8"),
            ("d", "a", "0.005"),
        )

        once = netter.net(graph)
        twice = netter.net(RawDebtGraph.from_edges(once))

        assert once == twice

    def test_sorted_output(self, netter: DebtNetter) -> None:
        edges = netter.net(_graph(("carol", "alice", "1"), ("bob", "alice", "2"), ("alice", "dave", "3")))

        assert [(e.from_member, e.to_member) for e in edges] == [
            ("alice", "dave"),
            ("bob", "alice"),
            ("carol", "alice"),
        ]

    def test_custom_tolerance(self) -> None:
        netter = DebtNetter(tolerance=Decimal("1"))

        assert netter.net(_graph(("a", "b", "0.99"))) == []
        assert netter.net(_graph(("a", "b", "1.01"))) == [DebtEdge("a", "b", Decimal("1.01"))]


class TestSettlementScenario:
    """집계 + 상계 시나리오"""

    def test_settlement_reduces_debt(self, alice, bob, make_expense, make_settlement) -> None:
        """A가 B에게 50 채무, 20 정산 → A→B 30"""
        expense = make_expense("bob", "100", ["alice", "bob"])
        settlement = make_settlement("alice", "bob", "20")

        graph = LedgerAggregator().aggregate([alice, bob], [expense], [settlement])
        edges = DebtNetter().net(graph)

        assert edges == [DebtEdge("alice", "bob", Decimal("30.00"))]

    def test_mutual_expenses(self, alice, bob, make_expense) -> None:
        """서로 결제한 지출은 차액만 남음"""
        expenses = [
            make_expense("alice", "60", ["alice", "bob"]),
            make_expense("bob", "20", ["alice", "bob"]),
        ]

        graph = LedgerAggregator().aggregate([alice, bob], expenses, [])
        edges = DebtNetter().net(graph)

        assert edges == [DebtEdge("bob", "alice", Decimal("20.00"))]
