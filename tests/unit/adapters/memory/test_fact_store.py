"""
InMemoryFactStore 테스트
"""

from decimal import Decimal

import pytest

from adapters.interfaces import MemberNotFoundError
from adapters.memory.fact_store import InMemoryFactStore
from core.ledger.models import Expense, ExpenseShare, Settlement
from core.ledger.types import SplitType


def _expense(expense_id: str, group_id: str = "group-1") -> Expense:
    return Expense(
        expense_id=expense_id,
        group_id=group_id,
        paid_by="alice",
        amount=Decimal("20"),
        split_type=SplitType.EQUAL,
        shares=(
            ExpenseShare(f"{expense_id}:alice", expense_id, "alice", Decimal("10"), Decimal("50"), True),
            ExpenseShare(f"{expense_id}:bob", expense_id, "bob", Decimal("10"), Decimal("50")),
        ),
    )


class TestInMemoryFactStore:
    """InMemoryFactStore 테스트"""

    @pytest.fixture
    def store(self, alice, bob) -> InMemoryFactStore:
        store = InMemoryFactStore()
        store.add_member("group-1", alice)
        store.add_member("group-1", bob)
        return store

    @pytest.mark.asyncio
    async def test_list_members(self, store: InMemoryFactStore, alice, bob) -> None:
        """가입 순서대로 반환, 중복 가입 무시"""
        store.add_member("group-1", alice)

        assert await store.list_members("group-1") == [alice, bob]
        assert await store.list_members("group-2") == []

    @pytest.mark.asyncio
    async def test_get_member(self, store: InMemoryFactStore, carol) -> None:
        """그룹 외 사용자도 조회 가능"""
        store.register_user(carol)

        assert await store.get_member("carol") == carol
        assert carol not in await store.list_members("group-1")

    @pytest.mark.asyncio
    async def test_add_member_registers_user(self, store: InMemoryFactStore, alice, dave) -> None:
        """그룹 가입 시 사용자 디렉토리에도 등록"""
        store.add_member("group-2", dave)

        assert await store.get_member("dave") == dave
        assert await store.get_member("alice") == alice

    @pytest.mark.asyncio
    async def test_get_member_not_found(self, store: InMemoryFactStore) -> None:
        with pytest.raises(MemberNotFoundError):
            await store.get_member("ghost")

    @pytest.mark.asyncio
    async def test_expenses_by_group(self, store: InMemoryFactStore) -> None:
        await store.add_expense(_expense("exp-1"))
        await store.add_expense(_expense("exp-2", group_id="group-2"))

        expenses = await store.list_expenses_with_shares("group-1")

        assert [e.expense_id for e in expenses] == ["exp-1"]
        assert store.expense_count == 2

    @pytest.mark.asyncio
    async def test_duplicate_expense_rejected(self, store: InMemoryFactStore) -> None:
        await store.add_expense(_expense("exp-1"))

        with pytest.raises(ValueError):
            await store.add_expense(_expense("exp-1"))

    @pytest.mark.asyncio
    async def test_settlements_append_only(self, store: InMemoryFactStore) -> None:
        for i, amount in enumerate(["5", "7"]):
            await store.append_settlement(
                Settlement(f"stl-{i}", "group-1", "bob", "alice", Decimal(amount))
            )

        settlements = await store.list_settlements("group-1")

        assert [s.amount for s in settlements] == [Decimal("5"), Decimal("7")]
        assert store.settlement_count == 2

    @pytest.mark.asyncio
    async def test_mark_share_settled(self, store: InMemoryFactStore) -> None:
        await store.add_expense(_expense("exp-1"))

        await store.mark_share_settled("exp-1:bob")

        expense = (await store.list_expenses_with_shares("group-1"))[0]
        assert all(share.settled for share in expense.shares)

    @pytest.mark.asyncio
    async def test_mark_share_settled_unknown(self, store: InMemoryFactStore) -> None:
        with pytest.raises(KeyError):
            await store.mark_share_settled("exp-404:bob")

    @pytest.mark.asyncio
    async def test_returned_lists_are_copies(self, store: InMemoryFactStore) -> None:
        """조회 결과 변경이 저장소에 영향 없음"""
        await store.add_expense(_expense("exp-1"))

        expenses = await store.list_expenses_with_shares("group-1")
        expenses.clear()

        assert len(await store.list_expenses_with_shares("group-1")) == 1
