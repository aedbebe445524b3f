"""
원장 엔진 테스트 픽스처

지출/정산 생성 헬퍼 제공.
"""

from decimal import Decimal
from typing import Callable

import pytest

from core.ledger.models import Expense, Settlement
from core.ledger.split_calculator import SplitCalculator
from core.ledger.types import SplitType


@pytest.fixture
def make_expense() -> Callable[..., Expense]:
    """SplitCalculator로 몫을 계산한 Expense 생성"""
    calculator = SplitCalculator()
    counter = {"n": 0}

    def _make(
        paid_by: str,
        amount: str,
        participants: list[str],
        split_type: SplitType = SplitType.EQUAL,
        strategy_input: dict[str, str] | None = None,
        group_id: str = "group-1",
    ) -> Expense:
        counter["n"] += 1
        expense_id = f"exp-{counter['n']}"
        shares = calculator.calculate(
            expense_id=expense_id,
            amount=Decimal(amount),
            paid_by=paid_by,
            split_type=split_type,
            participants=participants,
            strategy_input=strategy_input,
        )
        return Expense(
            expense_id=expense_id,
            group_id=group_id,
            paid_by=paid_by,
            amount=Decimal(amount),
            split_type=split_type,
            shares=tuple(shares),
        )

    return _make


@pytest.fixture
def make_settlement() -> Callable[..., Settlement]:
    """Settlement 생성"""
    counter = {"n": 0}

    def _make(from_member: str, to_member: str, amount: str, group_id: str = "group-1") -> Settlement:
        counter["n"] += 1
        return Settlement(
            settlement_id=f"stl-{counter['n']}",
            group_id=group_id,
            from_member=from_member,
            to_member=to_member,
            amount=Decimal(amount),
        )

    return _make
