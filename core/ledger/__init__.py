"""
그룹 지출 원장 & 채무 상계 엔진

지출을 구성원별 몫으로 나누고, 모든 몫과 정산을 모아
구성원 간 최소 송금 목록을 계산하는 순수 계산 엔진.
저장소를 소유하지 않으며 호출자가 준 스냅샷만 사용.

사용 예시:
```python
from core.ledger import (
    BalanceSummarizer,
    DebtNetter,
    LedgerAggregator,
    SplitCalculator,
)

shares = SplitCalculator(settings).calculate(
    expense_id="exp-1",
    amount=Decimal("90.00"),
    paid_by="alice",
    split_type=SplitType.EQUAL,
    participants=["alice", "bob", "carol"],
)

graph = LedgerAggregator().aggregate(members, expenses, settlements)
transfers = DebtNetter(settings.tolerance).net(graph)
summary = BalanceSummarizer().summarize(group_id, members, transfers)
```
"""

from core.ledger.aggregator import LedgerAggregator, unsettled_shares_for
from core.ledger.errors import (
    AmountMustBePositiveError,
    EmptyParticipantSetError,
    InvalidSplitError,
    LedgerError,
    MalformedAmountError,
    SelfSettlementError,
    UnknownStrategyError,
    ValidationError,
)
from core.ledger.models import (
    BalanceSummary,
    DebtEdge,
    Expense,
    ExpenseShare,
    Member,
    MemberBalance,
    RawDebtGraph,
    Settlement,
)
from core.ledger.netter import DebtNetter
from core.ledger.split_calculator import (
    CustomSplit,
    EqualSplit,
    PercentSplit,
    SplitCalculator,
    SplitStrategy,
)
from core.ledger.summarizer import BalanceSummarizer
from core.ledger.types import ExpenseCategory, InvalidSplitReason, SplitType

__all__ = [
    # 핵심 클래스
    "SplitCalculator",
    "LedgerAggregator",
    "DebtNetter",
    "BalanceSummarizer",
    "unsettled_shares_for",
    # 분할 방식
    "SplitStrategy",
    "EqualSplit",
    "CustomSplit",
    "PercentSplit",
    # 모델
    "Member",
    "Expense",
    "ExpenseShare",
    "Settlement",
    "DebtEdge",
    "RawDebtGraph",
    "MemberBalance",
    "BalanceSummary",
    # Enum
    "SplitType",
    "ExpenseCategory",
    "InvalidSplitReason",
    # 예외
    "LedgerError",
    "ValidationError",
    "AmountMustBePositiveError",
    "EmptyParticipantSetError",
    "InvalidSplitError",
    "MalformedAmountError",
    "UnknownStrategyError",
    "SelfSettlementError",
]
