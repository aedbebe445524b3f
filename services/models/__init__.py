"""
서비스 모델 패키지

Pydantic 스키마 정의
"""

from services.models.requests import (
    CustomSplitEntry,
    ExpenseCreateRequest,
    SettlementRequest,
)
from services.models.responses import (
    BalanceSummaryResponse,
    ExpenseResponse,
    ExpenseShareResponse,
    MemberBalanceResponse,
    MemberResponse,
    TransferResponse,
)

__all__ = [
    # Requests
    "CustomSplitEntry",
    "ExpenseCreateRequest",
    "SettlementRequest",
    # Responses
    "BalanceSummaryResponse",
    "ExpenseResponse",
    "ExpenseShareResponse",
    "MemberBalanceResponse",
    "MemberResponse",
    "TransferResponse",
]
