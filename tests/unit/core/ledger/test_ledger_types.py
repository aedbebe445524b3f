"""
core/ledger/types.py 테스트
"""

import pytest

from core.ledger.types import ExpenseCategory, InvalidSplitReason, SplitType


class TestSplitType:
    """SplitType Enum 테스트"""

    def test_values(self) -> None:
        assert SplitType.EQUAL.value == "equal"
        assert SplitType.CUSTOM.value == "custom"
        assert SplitType.PERCENT.value == "percent"

    def test_str_enum(self) -> None:
        """문자열 비교 가능"""
        assert SplitType.EQUAL == "equal"
        assert SplitType("percent") is SplitType.PERCENT

    def test_invalid(self) -> None:
        with pytest.raises(ValueError):
            SplitType("shares")


class TestExpenseCategory:
    """ExpenseCategory Enum 테스트"""

    def test_display_values(self) -> None:
        assert ExpenseCategory("Food & Dining") is ExpenseCategory.FOOD_AND_DINING
        assert ExpenseCategory.OTHER.value == "Other"


class TestInvalidSplitReason:
    def test_members(self) -> None:
        assert {r.name for r in InvalidSplitReason} == {
            "AMOUNT_MISMATCH",
            "PERCENT_MISMATCH",
            "PARTICIPANT_MISMATCH",
            "DUPLICATE_PARTICIPANT",
            "NEGATIVE_SHARE",
        }
