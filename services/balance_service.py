"""
잔액 서비스

사실 피드에서 그룹 스냅샷을 읽고 원장 엔진으로 잔액을 계산.
정산 기록(추가 전용 쓰기)도 담당.
"""

import logging
from decimal import Decimal
from uuid import uuid4

from adapters.interfaces import IFactFeed, IFactWriter, IUserDirectory
from core.config.loader import LedgerSettings
from core.ledger.aggregator import LedgerAggregator
from core.ledger.errors import (
    AmountMustBePositiveError,
    MalformedAmountError,
    SelfSettlementError,
)
from core.ledger.models import BalanceSummary, MemberBalance, Settlement
from core.ledger.netter import DebtNetter
from core.ledger.summarizer import BalanceSummarizer
from core.utils.money import to_decimal
from core.utils.timezone import now_utc
from services.models.requests import SettlementRequest

logger = logging.getLogger(__name__)


class BalanceService:
    """그룹 잔액 계산 서비스

    매 조회마다 전체 사실로부터 다시 계산 (캐시 없음).
    feed의 세 조회 결과가 하나의 일관된 스냅샷이어야 하는 것은 호출자 책임.

    Args:
        feed: 지출/정산/구성원 조회
        directory: 그룹 외 사용자 조회
        writer: 정산 기록
        settings: 원장 설정
    """

    def __init__(
        self,
        feed: IFactFeed,
        directory: IUserDirectory,
        writer: IFactWriter,
        settings: LedgerSettings | None = None,
    ):
        self.feed = feed
        self.directory = directory
        self.writer = writer
        self.settings = settings or LedgerSettings()

        self.aggregator = LedgerAggregator()
        self.netter = DebtNetter(self.settings.tolerance)
        self.summarizer = BalanceSummarizer()

    async def calculate_group_balances(self, group_id: str) -> BalanceSummary:
        """그룹 잔액 요약

        Args:
            group_id: 그룹 ID

        Returns:
            송금 목록 + 구성원별 요약
        """
        members = await self.feed.list_members(group_id)
        expenses = await self.feed.list_expenses_with_shares(group_id)
        settlements = await self.feed.list_settlements(group_id)

        graph = self.aggregator.aggregate(members, expenses, settlements)
        transfers = self.netter.net(graph)
        summary = self.summarizer.summarize(group_id, members, transfers)

        if not summary.is_conserved(self.settings.tolerance):
            # 스냅샷 불일치 (구성원 목록과 사실 불일치 등)
            logger.warning(f"Balance summary is not conserved: group={group_id}")

        logger.debug(
            f"Group balances calculated: group={group_id} members={len(members)} "
            f"expenses={len(expenses)} settlements={len(settlements)} transfers={len(transfers)}"
        )
        return summary

    async def calculate_member_balance(self, group_id: str, member_id: str) -> MemberBalance:
        """구성원 1명의 잔액 요약

        그룹 요약에 없는 구성원은 사용자 조회 후 0 요약 반환.

        Raises:
            MemberNotFoundError: 사용자 조회 실패
        """
        summary = await self.calculate_group_balances(group_id)
        balance = summary.for_member(member_id)
        if balance is not None:
            return balance

        member = await self.directory.get_member(member_id)
        return self.summarizer.member_balance(summary, member)

    async def record_settlement(
        self,
        group_id: str,
        from_member: str,
        to_member: str,
        amount: Decimal | int | str,
    ) -> Settlement:
        """정산 기록

        기존 채무 존재 여부는 검증하지 않음 (선지급/추정 정산 허용).

        Args:
            group_id: 그룹 ID
            from_member: 송금자
            to_member: 수취인
            amount: 금액 (> 0)

        Returns:
            기록된 Settlement

        Raises:
            MalformedAmountError: 숫자로 해석할 수 없는 amount
            AmountMustBePositiveError: amount <= 0
            SelfSettlementError: from_member == to_member
        """
        try:
            value = to_decimal(amount)
        except ValueError as e:
            logger.warning(f"Settlement rejected: group={group_id} malformed amount={amount!r}")
            raise MalformedAmountError(amount) from e
        if value <= 0:
            logger.warning(f"Settlement rejected: group={group_id} amount={amount}")
            raise AmountMustBePositiveError(amount)
        if from_member == to_member:
            logger.warning(f"Settlement rejected: group={group_id} self-settlement by {from_member}")
            raise SelfSettlementError(from_member)

        settlement = Settlement(
            settlement_id=str(uuid4()),
            group_id=group_id,
            from_member=from_member,
            to_member=to_member,
            amount=value,
            created_at=now_utc(),
        )
        await self.writer.append_settlement(settlement)

        logger.info(
            f"Settlement recorded: group={group_id} {from_member} -> {to_member} amount={value}"
        )
        return settlement

    async def record_settlement_request(
        self,
        group_id: str,
        request: SettlementRequest,
    ) -> Settlement:
        """SettlementRequest로 정산 기록"""
        return await self.record_settlement(
            group_id,
            request.from_user,
            request.to_user,
            request.amount,
        )

    async def list_settlements_between(
        self,
        group_id: str,
        member_a: str,
        member_b: str,
    ) -> list[Settlement]:
        """두 구성원 사이의 정산 목록 (양방향, 기록 역순)"""
        pair = {member_a, member_b}
        settlements = await self.feed.list_settlements(group_id)
        matched = [
            s for s in settlements
            if {s.from_member, s.to_member} == pair
        ]
        return list(reversed(matched))
