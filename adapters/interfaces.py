"""
어댑터 인터페이스 정의

원장 엔진이 소비하는 외부 협력자(사실 피드, 사용자 조회, 사실 기록)를
Protocol 기반으로 정의하여 의존성 주입 및 Mock 교체 가능.
모든 구현체는 이 Protocol을 준수해야 함.
"""

from typing import Protocol, runtime_checkable

from core.ledger.models import Expense, Member, Settlement


class MemberNotFoundError(LookupError):
    """구성원(사용자) 조회 실패"""

    def __init__(self, member_id: str):
        self.member_id = member_id
        super().__init__(f"member not found: {member_id}")


@runtime_checkable
class IFactFeed(Protocol):
    """그룹 사실 조회 인터페이스 (읽기 전용)

    세 메서드의 결과는 하나의 일관된 스냅샷을 반영해야 함.
    스냅샷 격리는 구현체(저장소)의 책임.
    """

    async def list_expenses_with_shares(self, group_id: str) -> list[Expense]:
        """그룹의 전체 지출 (몫 포함)

        Args:
            group_id: 그룹 ID

        Returns:
            Expense 목록 (각 Expense.shares 채워짐)
        """
        ...

    async def list_settlements(self, group_id: str) -> list[Settlement]:
        """그룹의 전체 정산"""
        ...

    async def list_members(self, group_id: str) -> list[Member]:
        """그룹 구성원 목록"""
        ...


@runtime_checkable
class IUserDirectory(Protocol):
    """사용자 조회 인터페이스"""

    async def get_member(self, member_id: str) -> Member:
        """구성원 조회

        Raises:
            MemberNotFoundError: 존재하지 않는 구성원
        """
        ...


@runtime_checkable
class IFactWriter(Protocol):
    """사실 기록 인터페이스 (추가 전용)"""

    async def add_expense(self, expense: Expense) -> None:
        """지출 (몫 포함) 기록"""
        ...

    async def append_settlement(self, settlement: Settlement) -> None:
        """정산 기록"""
        ...

    async def mark_share_settled(self, share_id: str) -> None:
        """몫을 정산 완료로 표시

        Raises:
            KeyError: 존재하지 않는 몫
        """
        ...
