"""
메모리 사실 저장소

IFactFeed, IUserDirectory, IFactWriter Protocol 준수.
엔진을 내장하는 애플리케이션의 단일 프로세스 저장소 및 테스트용.
"""

from dataclasses import dataclass, field, replace

from adapters.interfaces import MemberNotFoundError
from core.ledger.models import Expense, Member, Settlement


@dataclass
class FactStoreState:
    """저장소 상태 (메모리 내 저장)"""

    # 구성원 (member_id -> Member)
    members: dict[str, Member] = field(default_factory=dict)

    # 그룹 구성원 (group_id -> member_id 목록, 가입 순서)
    group_members: dict[str, list[str]] = field(default_factory=dict)

    # 지출 (expense_id -> Expense), 기록 순서 유지
    expenses: dict[str, Expense] = field(default_factory=dict)

    # 정산 (기록 순서)
    settlements: list[Settlement] = field(default_factory=list)


class InMemoryFactStore:
    """메모리 사실 저장소

    읽기 메서드는 await 지점 없이 한 번에 복사본을 반환하므로
    단일 이벤트 루프 안에서는 각 호출이 일관된 시점을 본다.

    사용 예시:
    ```python
    store = InMemoryFactStore()
    store.add_member("team-1", Member("alice", "Alice"))
    store.add_member("team-1", Member("bob", "Bob"))

    await store.add_expense(expense)
    members = await store.list_members("team-1")
    ```
    """

    def __init__(self, state: FactStoreState | None = None):
        self.state = state or FactStoreState()

    # -------------------------------------------------------------------------
    # 구성원 관리 (동기 헬퍼)
    # -------------------------------------------------------------------------

    def register_user(self, member: Member) -> None:
        """그룹 가입 없이 사용자만 등록 (IUserDirectory 조회 대상)"""
        self.state.members[member.member_id] = member

    def add_member(self, group_id: str, member: Member) -> None:
        """사용자 등록 및 그룹 가입 (중복 가입 무시)"""
        self.register_user(member)
        roster = self.state.group_members.setdefault(group_id, [])
        if member.member_id not in roster:
            roster.append(member.member_id)

    # -------------------------------------------------------------------------
    # IFactFeed
    # -------------------------------------------------------------------------

    async def list_expenses_with_shares(self, group_id: str) -> list[Expense]:
        return [e for e in self.state.expenses.values() if e.group_id == group_id]

    async def list_settlements(self, group_id: str) -> list[Settlement]:
        return [s for s in self.state.settlements if s.group_id == group_id]

    async def list_members(self, group_id: str) -> list[Member]:
        return [
            self.state.members[member_id]
            for member_id in self.state.group_members.get(group_id, [])
        ]

    # -------------------------------------------------------------------------
    # IUserDirectory
    # -------------------------------------------------------------------------

    async def get_member(self, member_id: str) -> Member:
        member = self.state.members.get(member_id)
        if member is None:
            raise MemberNotFoundError(member_id)
        return member

    # -------------------------------------------------------------------------
    # IFactWriter
    # -------------------------------------------------------------------------

    async def add_expense(self, expense: Expense) -> None:
        if expense.expense_id in self.state.expenses:
            raise ValueError(f"expense already exists: {expense.expense_id}")
        self.state.expenses[expense.expense_id] = expense

    async def append_settlement(self, settlement: Settlement) -> None:
        self.state.settlements.append(settlement)

    async def mark_share_settled(self, share_id: str) -> None:
        for expense_id, expense in self.state.expenses.items():
            for share in expense.shares:
                if share.share_id != share_id:
                    continue
                shares = tuple(
                    replace(s, settled=True) if s.share_id == share_id else s
                    for s in expense.shares
                )
                self.state.expenses[expense_id] = replace(expense, shares=shares)
                return
        raise KeyError(f"share not found: {share_id}")

    # -------------------------------------------------------------------------
    # 테스트 헬퍼
    # -------------------------------------------------------------------------

    @property
    def expense_count(self) -> int:
        """전체 지출 수"""
        return len(self.state.expenses)

    @property
    def settlement_count(self) -> int:
        """전체 정산 수"""
        return len(self.state.settlements)
