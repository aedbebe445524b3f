"""
원장 도메인 모델

엔진이 소비하는 사실(Member, Expense, ExpenseShare, Settlement)과
엔진이 산출하는 값(RawDebtGraph, DebtEdge, MemberBalance, BalanceSummary).
모든 금액은 Decimal 타입 사용. 엔진은 입력 모델을 절대 변경하지 않음.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Iterable, Iterator

from core.constants import Defaults
from core.ledger.types import ExpenseCategory, SplitType

ZERO = Decimal("0")


@dataclass(frozen=True)
class Member:
    """그룹 구성원

    Attributes:
        member_id: 불변 식별자
        name: 표시 이름
        email: 이메일 (선택)
    """

    member_id: str
    name: str
    email: str | None = None


@dataclass(frozen=True)
class ExpenseShare:
    """지출 1건에 대한 구성원 1명의 몫

    Attributes:
        share_id: 몫 ID
        expense_id: 지출 ID
        member_id: 부담하는 구성원
        amount: 부담 금액
        percent: 총액 대비 비율 (0~100)
        settled: 정산 완료 여부 (결제자 본인 몫은 생성 시 True)
    """

    share_id: str
    expense_id: str
    member_id: str
    amount: Decimal
    percent: Decimal
    settled: bool = False


@dataclass(frozen=True)
class Expense:
    """지출

    amount는 결제자 본인 몫을 포함한 전체 참여자 부담 총액.
    shares는 생성 시 SplitCalculator가 계산한 몫 목록.
    """

    expense_id: str
    group_id: str
    paid_by: str
    amount: Decimal
    split_type: SplitType
    shares: tuple[ExpenseShare, ...] = ()
    description: str = ""
    category: ExpenseCategory = ExpenseCategory.OTHER
    created_at: datetime | None = None


@dataclass(frozen=True)
class Settlement:
    """정산 (외부에서 이루어진 송금 사실)

    from_member가 to_member에게 amount를 지급하여 그 방향의 채무를 줄임.
    추가 전용이며 수정되지 않음.
    """

    settlement_id: str
    group_id: str
    from_member: str
    to_member: str
    amount: Decimal
    created_at: datetime | None = None


@dataclass(frozen=True)
class DebtEdge:
    """채무 간선 (from_member → to_member, amount)"""

    from_member: str
    to_member: str
    amount: Decimal


@dataclass
class RawDebtGraph:
    """상계 전 방향성 채무 그래프

    (채무자, 채권자) → 누적 금액. 0 또는 음수(초과 정산)도 그대로 보존하며
    정리는 DebtNetter가 담당.

    Attributes:
        member_ids: 그래프를 구성한 그룹 구성원 (채무가 없는 구성원도 포함)
    """

    member_ids: frozenset[str] = frozenset()
    _edges: dict[tuple[str, str], Decimal] = field(default_factory=dict)

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[DebtEdge],
        member_ids: Iterable[str] = (),
    ) -> "RawDebtGraph":
        """간선 목록으로 그래프 생성 (상계 결과 재입력 등)"""
        graph = cls(member_ids=frozenset(member_ids))
        for edge in edges:
            graph.add(edge.from_member, edge.to_member, edge.amount)
        return graph

    def add(self, debtor: str, creditor: str, amount: Decimal) -> None:
        """debtor → creditor 간선에 금액 가산"""
        key = (debtor, creditor)
        self._edges[key] = self._edges.get(key, ZERO) + amount

    def subtract(self, debtor: str, creditor: str, amount: Decimal) -> None:
        """debtor → creditor 간선에서 금액 차감 (음수 허용)"""
        self.add(debtor, creditor, -amount)

    def get(self, debtor: str, creditor: str) -> Decimal:
        """간선 금액 (없으면 0)"""
        return self._edges.get((debtor, creditor), ZERO)

    def items(self) -> Iterator[tuple[tuple[str, str], Decimal]]:
        """(채무자, 채권자), 금액 순회"""
        return iter(self._edges.items())

    def pairs(self) -> list[tuple[str, str]]:
        """간선이 하나라도 있는 비순서 쌍 목록 (정렬됨)"""
        seen = {tuple(sorted(key)) for key, _ in self.items()}
        return sorted(seen)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(self._edges)


@dataclass(frozen=True)
class MemberBalance:
    """구성원별 잔액 요약

    Attributes:
        member: 구성원
        total_owed: 이 구성원이 다른 사람에게 갚아야 할 금액
        total_owing: 다른 사람이 이 구성원에게 갚아야 할 금액
        net_balance: total_owing - total_owed (양수 = 받을 돈, 음수 = 줄 돈)
    """

    member: Member
    total_owed: Decimal = ZERO
    total_owing: Decimal = ZERO
    net_balance: Decimal = ZERO

    @classmethod
    def zero(cls, member: Member) -> "MemberBalance":
        """채무가 없는 구성원의 요약"""
        return cls(member=member)


@dataclass(frozen=True)
class BalanceSummary:
    """그룹 잔액 요약

    Attributes:
        group_id: 그룹 ID
        transfers: 상계 후 송금 목록
        members: 구성원별 요약 (구성원 목록 순서)
    """

    group_id: str
    transfers: tuple[DebtEdge, ...] = ()
    members: tuple[MemberBalance, ...] = ()

    def for_member(self, member_id: str) -> MemberBalance | None:
        """특정 구성원의 요약 (없으면 None)"""
        for balance in self.members:
            if balance.member.member_id == member_id:
                return balance
        return None

    def is_conserved(self, tolerance: Decimal = Defaults.TOLERANCE) -> bool:
        """보존 법칙 검증

        Returns:
            True if Σ total_owed ≈ Σ total_owing 이고 Σ net_balance ≈ 0
        """
        total_owed = sum((b.total_owed for b in self.members), ZERO)
        total_owing = sum((b.total_owing for b in self.members), ZERO)
        net_total = sum((b.net_balance for b in self.members), ZERO)
        return abs(total_owed - total_owing) <= tolerance and abs(net_total) <= tolerance
