"""
지출 서비스

지출 생성 시 분할 계산 후 사실 저장소에 기록.
"""

import logging
from decimal import Decimal
from typing import Mapping, Sequence
from uuid import uuid4

from adapters.interfaces import IFactFeed, IFactWriter
from core.config.loader import LedgerSettings
from core.ledger.aggregator import unsettled_shares_for
from core.ledger.errors import ValidationError
from core.ledger.models import Expense, ExpenseShare
from core.ledger.split_calculator import SplitCalculator
from core.ledger.types import SplitType
from core.utils.money import to_decimal
from core.utils.timezone import now_utc
from services.models.requests import ExpenseCreateRequest

logger = logging.getLogger(__name__)


class ExpenseService:
    """지출 생성/조회 서비스

    Args:
        feed: 지출 조회
        writer: 지출 기록, 몫 정산 표시
        settings: 원장 설정
    """

    def __init__(
        self,
        feed: IFactFeed,
        writer: IFactWriter,
        settings: LedgerSettings | None = None,
    ):
        self.feed = feed
        self.writer = writer
        self.settings = settings or LedgerSettings()
        self.calculator = SplitCalculator(self.settings)

    def compute_splits(
        self,
        expense_id: str,
        amount: Decimal | int | str,
        paid_by: str,
        split_type: SplitType | str,
        participants: Sequence[str] | None = None,
        strategy_input: Mapping[str, Decimal | int | str] | None = None,
    ) -> list[ExpenseShare]:
        """분할 계산 (저장 없음)

        Raises:
            ValidationError: 금액/참여자/분할 입력 오류
        """
        return self.calculator.calculate(
            expense_id=expense_id,
            amount=amount,
            paid_by=paid_by,
            split_type=split_type,
            participants=participants,
            strategy_input=strategy_input,
        )

    async def create_expense(
        self,
        group_id: str,
        paid_by: str,
        request: ExpenseCreateRequest,
    ) -> Expense:
        """지출 생성

        분할 계산이 실패하면 아무것도 기록하지 않음.

        Args:
            group_id: 그룹 ID
            paid_by: 결제자 ID
            request: 지출 생성 요청

        Returns:
            몫이 포함된 Expense

        Raises:
            ValidationError: 분할 계산 실패
        """
        expense_id = str(uuid4())

        try:
            shares = self.compute_splits(
                expense_id=expense_id,
                amount=request.amount,
                paid_by=paid_by,
                split_type=request.split_type,
                participants=request.participants(),
                strategy_input=request.strategy_input(),
            )
        except ValidationError as e:
            logger.warning(f"Expense rejected: group={group_id} paid_by={paid_by} reason={e}")
            raise

        expense = Expense(
            expense_id=expense_id,
            group_id=group_id,
            paid_by=paid_by,
            amount=to_decimal(request.amount),
            split_type=request.split_type,
            shares=tuple(shares),
            description=request.description,
            category=request.category,
            created_at=now_utc(),
        )
        await self.writer.add_expense(expense)

        logger.info(
            f"Expense created: group={group_id} expense={expense_id} "
            f"paid_by={paid_by} amount={expense.amount} type={expense.split_type.value}"
        )
        return expense

    async def list_unsettled_shares(self, group_id: str, member_id: str) -> list[ExpenseShare]:
        """구성원이 아직 갚지 않은 몫 목록"""
        expenses = await self.feed.list_expenses_with_shares(group_id)
        return unsettled_shares_for(member_id, expenses)

    async def mark_share_settled(self, share_id: str) -> None:
        """몫을 정산 완료로 표시 (이후 집계에서 제외)

        Raises:
            KeyError: 존재하지 않는 몫
        """
        await self.writer.mark_share_settled(share_id)
        logger.info(f"Share marked as settled: share={share_id}")
