"""
잔액 요약기

상계된 송금 목록 + 구성원 목록 → 구성원별 합계와 그룹 송금 목록
"""

import logging
from decimal import Decimal
from typing import Iterable, Sequence

from core.ledger.models import ZERO, BalanceSummary, DebtEdge, Member, MemberBalance

logger = logging.getLogger(__name__)


class BalanceSummarizer:
    """구성원별 잔액 요약

    간선 (채무자 → 채권자, amount) 마다:
    - total_owed[채무자] += amount
    - total_owing[채권자] += amount
    net_balance = total_owing - total_owed
    """

    def summarize(
        self,
        group_id: str,
        members: Sequence[Member],
        transfers: Iterable[DebtEdge],
    ) -> BalanceSummary:
        """그룹 잔액 요약 생성

        Args:
            group_id: 그룹 ID
            members: 구성원 목록 (결과의 구성원 순서)
            transfers: DebtNetter 결과

        Returns:
            BalanceSummary
        """
        transfer_list = tuple(transfers)
        owed: dict[str, Decimal] = {m.member_id: ZERO for m in members}
        owing: dict[str, Decimal] = {m.member_id: ZERO for m in members}

        for edge in transfer_list:
            owed[edge.from_member] = owed.get(edge.from_member, ZERO) + edge.amount
            owing[edge.to_member] = owing.get(edge.to_member, ZERO) + edge.amount

        unknown = (set(owed) | set(owing)) - {m.member_id for m in members}
        if unknown:
            # 스냅샷 외부 구성원과의 채무는 송금 목록에만 나타남
            logger.warning(
                f"Transfers reference non-members: group={group_id} members={sorted(unknown)}"
            )

        balances = tuple(
            MemberBalance(
                member=member,
                total_owed=owed[member.member_id],
                total_owing=owing[member.member_id],
                net_balance=owing[member.member_id] - owed[member.member_id],
            )
            for member in members
        )

        return BalanceSummary(group_id=group_id, transfers=transfer_list, members=balances)

    def member_balance(self, summary: BalanceSummary, member: Member) -> MemberBalance:
        """단일 구성원 요약

        요약에 없는 구성원은 오류 대신 0으로 채운 요약 반환.
        """
        balance = summary.for_member(member.member_id)
        if balance is None:
            return MemberBalance.zero(member)
        return balance
