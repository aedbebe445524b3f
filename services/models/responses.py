"""
응답 스키마 (Pydantic)

BalanceSummary / Expense 직렬화. 금액은 정밀도 보존을 위해 문자열.
"""

from pydantic import BaseModel, Field

from core.ledger.models import BalanceSummary, Expense, ExpenseShare, Member, MemberBalance
from core.utils.timezone import ensure_utc


class MemberResponse(BaseModel):
    """구성원 응답"""

    id: str = Field(..., description="구성원 ID")
    name: str = Field(..., description="표시 이름")
    email: str | None = Field(default=None, description="이메일")

    @classmethod
    def from_domain(cls, member: Member) -> "MemberResponse":
        return cls(id=member.member_id, name=member.name, email=member.email)


class TransferResponse(BaseModel):
    """송금 응답 (from_user → to_user)"""

    from_user: MemberResponse = Field(..., description="송금해야 할 구성원")
    to_user: MemberResponse = Field(..., description="받아야 할 구성원")
    amount: str = Field(..., description="금액")


class MemberBalanceResponse(BaseModel):
    """구성원 잔액 응답"""

    user: MemberResponse = Field(..., description="구성원")
    total_owed: str = Field(..., description="다른 사람에게 갚아야 할 금액")
    total_owing: str = Field(..., description="다른 사람이 갚아야 할 금액")
    net_balance: str = Field(..., description="양수 = 받을 돈, 음수 = 줄 돈")

    @classmethod
    def from_domain(cls, balance: MemberBalance) -> "MemberBalanceResponse":
        return cls(
            user=MemberResponse.from_domain(balance.member),
            total_owed=str(balance.total_owed),
            total_owing=str(balance.total_owing),
            net_balance=str(balance.net_balance),
        )


class BalanceSummaryResponse(BaseModel):
    """그룹 잔액 요약 응답"""

    group_id: str = Field(..., description="그룹 ID")
    balances: list[TransferResponse] = Field(default_factory=list, description="송금 목록")
    members: list[MemberBalanceResponse] = Field(default_factory=list, description="구성원별 요약")

    @classmethod
    def from_domain(cls, summary: BalanceSummary) -> "BalanceSummaryResponse":
        roster = {b.member.member_id: b.member for b in summary.members}

        def _member(member_id: str) -> MemberResponse:
            # 스냅샷 외부 구성원은 ID만으로 표시
            member = roster.get(member_id, Member(member_id=member_id, name=member_id))
            return MemberResponse.from_domain(member)

        return cls(
            group_id=summary.group_id,
            balances=[
                TransferResponse(
                    from_user=_member(edge.from_member),
                    to_user=_member(edge.to_member),
                    amount=str(edge.amount),
                )
                for edge in summary.transfers
            ],
            members=[MemberBalanceResponse.from_domain(b) for b in summary.members],
        )


class ExpenseShareResponse(BaseModel):
    """지출 몫 응답"""

    id: str = Field(..., description="몫 ID")
    user_id: str = Field(..., description="구성원 ID")
    amount: str = Field(..., description="부담 금액")
    percent: str = Field(..., description="부담 비율")
    is_settled: bool = Field(..., description="정산 완료 여부")

    @classmethod
    def from_domain(cls, share: ExpenseShare) -> "ExpenseShareResponse":
        return cls(
            id=share.share_id,
            user_id=share.member_id,
            amount=str(share.amount),
            percent=str(share.percent),
            is_settled=share.settled,
        )


class ExpenseResponse(BaseModel):
    """지출 응답"""

    id: str = Field(..., description="지출 ID")
    group_id: str = Field(..., description="그룹 ID")
    paid_by: str = Field(..., description="결제자 ID")
    amount: str = Field(..., description="총액")
    description: str = Field(default="", description="설명")
    category: str = Field(..., description="카테고리")
    split_type: str = Field(..., description="분할 방식")
    splits: list[ExpenseShareResponse] = Field(default_factory=list, description="몫 목록")
    created_at: str | None = Field(default=None, description="생성 시간 (UTC ISO)")

    @classmethod
    def from_domain(cls, expense: Expense) -> "ExpenseResponse":
        return cls(
            id=expense.expense_id,
            group_id=expense.group_id,
            paid_by=expense.paid_by,
            amount=str(expense.amount),
            description=expense.description,
            category=expense.category.value,
            split_type=expense.split_type.value,
            splits=[ExpenseShareResponse.from_domain(s) for s in expense.shares],
            created_at=ensure_utc(expense.created_at).isoformat() if expense.created_at else None,
        )
