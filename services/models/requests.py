"""
요청 스키마 (Pydantic)

지출 생성 / 정산 기록 요청 데이터 검증.
형식 검증만 담당하며 분할 합계 등 의미 검증은 원장 엔진이 수행.
"""

from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from core.ledger.types import ExpenseCategory, SplitType


class CustomSplitEntry(BaseModel):
    """구성원별 분할 입력 (custom 금액 또는 percent 비율)"""

    user_id: str = Field(..., min_length=1, description="구성원 ID")
    amount: Decimal = Field(default=Decimal("0"), description="부담 금액 (custom)")
    percent: Decimal = Field(default=Decimal("0"), description="부담 비율 (percent)")


class ExpenseCreateRequest(BaseModel):
    """지출 생성 요청

    split_type이 equal이면 split_with, custom/percent이면 custom_split 사용.
    """

    amount: Decimal = Field(..., gt=0, description="지출 총액 (결제자 몫 포함)")
    description: str = Field(default="", description="설명")
    category: ExpenseCategory = Field(default=ExpenseCategory.OTHER, description="카테고리")
    split_type: SplitType = Field(default=SplitType.EQUAL, description="분할 방식")
    split_with: list[str] = Field(default_factory=list, description="균등 분할 참여자 ID")
    custom_split: list[CustomSplitEntry] = Field(
        default_factory=list,
        description="custom/percent 분할 입력",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "amount": "90.00",
                    "description": "Team dinner",
                    "category": "Food & Dining",
                    "split_type": "equal",
                    "split_with": ["alice", "bob", "carol"],
                },
                {
                    "amount": "100.00",
                    "description": "Taxi",
                    "category": "Transportation",
                    "split_type": "percent",
                    "custom_split": [
                        {"user_id": "alice", "percent": "60"},
                        {"user_id": "bob", "percent": "40"},
                    ],
                },
            ]
        }
    }

    @field_validator("custom_split")
    @classmethod
    def _unique_entries(cls, entries: list[CustomSplitEntry]) -> list[CustomSplitEntry]:
        seen: set[str] = set()
        for entry in entries:
            if entry.user_id in seen:
                raise ValueError(f"duplicate custom_split entry: {entry.user_id}")
            seen.add(entry.user_id)
        return entries

    def participants(self) -> list[str]:
        """분할 참여자 ID 목록"""
        if self.split_type == SplitType.EQUAL:
            return list(self.split_with)
        return [entry.user_id for entry in self.custom_split]

    def strategy_input(self) -> dict[str, Decimal] | None:
        """분할 방식별 입력 (equal이면 None)"""
        if self.split_type == SplitType.CUSTOM:
            return {entry.user_id: entry.amount for entry in self.custom_split}
        if self.split_type == SplitType.PERCENT:
            return {entry.user_id: entry.percent for entry in self.custom_split}
        return None


class SettlementRequest(BaseModel):
    """정산 기록 요청"""

    from_user: str = Field(..., min_length=1, description="송금자 ID")
    to_user: str = Field(..., min_length=1, description="수취인 ID")
    amount: Decimal = Field(..., gt=0, description="정산 금액")
