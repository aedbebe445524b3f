"""
분할 계산기

지출 1건 + 분할 방식 → 구성원별 몫(ExpenseShare) 목록.
부작용 없는 순수 계산이며 저장소에 의존하지 않음.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Mapping, Sequence

from core.config.loader import LedgerSettings
from core.constants import Percent
from core.ledger.errors import (
    AmountMustBePositiveError,
    EmptyParticipantSetError,
    InvalidSplitError,
    MalformedAmountError,
    UnknownStrategyError,
)
from core.ledger.models import ZERO, ExpenseShare
from core.ledger.types import InvalidSplitReason, SplitType
from core.utils.money import floor_money, is_close, to_decimal

logger = logging.getLogger(__name__)

# (member_id, amount, percent)
Allocation = tuple[str, Decimal, Decimal]


def _percent_of(part: Decimal, total: Decimal) -> Decimal:
    """total 대비 part 비율 (0~100, Percent.PLACES 자릿수)"""
    return (part / total * Percent.WHOLE).quantize(Decimal(1).scaleb(-Percent.PLACES))


def _parse_amount(value: object) -> Decimal:
    """금액/비율 입력을 Decimal로 변환"""
    try:
        return to_decimal(value)  # type: ignore[arg-type]
    except ValueError as e:
        raise MalformedAmountError(value) from e


def _remainder_order(participants: Sequence[str], payer: str) -> list[str]:
    """잔여 최소 단위 배분 순서: 결제자 우선, 이후 참여자 순서"""
    if payer in participants:
        return [payer] + [p for p in participants if p != payer]
    return list(participants)


def distribute_remainder(
    amounts: dict[str, Decimal],
    total: Decimal,
    order: Sequence[str],
    unit: Decimal,
) -> dict[str, Decimal]:
    """내림으로 생긴 잔여 금액을 배분하여 합계를 total에 맞춤

    잔여가 양수이면 order 순서로 최소 단위씩 더하고, 최소 단위로 나누어
    떨어지지 않는 자투리는 order의 첫 구성원에게 더함.
    잔여가 음수이면 금액이 큰 구성원부터 차감하며 어떤 몫도 0 미만으로 내리지 않음.

    Args:
        amounts: 구성원별 내림 금액 (변경됨)
        total: 맞춰야 할 합계
        order: 배분 순서
        unit: 최소 통화 단위

    Returns:
        합계가 total과 정확히 같은 amounts
    """
    remainder = total - sum(amounts.values(), ZERO)
    if remainder == 0 or not order:
        return amounts

    if remainder < 0:
        deficit = -remainder
        for member_id in sorted(order, key=lambda m: amounts[m], reverse=True):
            taken = min(deficit, amounts[member_id])
            amounts[member_id] -= taken
            deficit -= taken
            if deficit == 0:
                break
        return amounts

    steps = int(remainder // unit)
    for i in range(steps):
        member_id = order[i % len(order)]
        amounts[member_id] += unit

    leftover = remainder - unit * steps
    if leftover:
        amounts[order[0]] += leftover

    return amounts


class SplitStrategy(ABC):
    """분할 방식 추상 클래스

    모든 분할 방식은 이 클래스를 상속하여 구현.
    """

    def __init__(self, settings: LedgerSettings):
        self.settings = settings

    @property
    @abstractmethod
    def split_type(self) -> SplitType:
        """담당 분할 방식"""
        pass

    @abstractmethod
    def allocate(
        self,
        amount: Decimal,
        participants: Sequence[str],
        payer: str,
        strategy_input: Mapping[str, Decimal],
    ) -> list[Allocation]:
        """구성원별 금액/비율 계산

        Args:
            amount: 지출 총액 (> 0)
            participants: 참여자 (비어있지 않고 중복 없음)
            payer: 결제자
            strategy_input: 방식별 입력 (custom 금액 / percent 비율)

        Returns:
            participants 순서의 (member_id, amount, percent) 목록

        Raises:
            InvalidSplitError: 입력 합계가 맞지 않는 경우
        """
        pass

    def _require_inputs(
        self,
        participants: Sequence[str],
        strategy_input: Mapping[str, Decimal],
    ) -> dict[str, Decimal]:
        """방식별 입력이 참여자와 정확히 일치하는지 검증"""
        if set(strategy_input) != set(participants):
            missing = sorted(set(participants) - set(strategy_input))
            extra = sorted(set(strategy_input) - set(participants))
            raise InvalidSplitError(
                InvalidSplitReason.PARTICIPANT_MISMATCH,
                f"{self.split_type.value} split input must cover exactly the participants "
                f"(missing={missing}, unexpected={extra})",
            )

        values: dict[str, Decimal] = {}
        for member_id in participants:
            value = _parse_amount(strategy_input[member_id])
            if value < 0:
                raise InvalidSplitError(
                    InvalidSplitReason.NEGATIVE_SHARE,
                    f"{self.split_type.value} split value for {member_id} must not be negative: {value}",
                )
            values[member_id] = value
        return values


class EqualSplit(SplitStrategy):
    """균등 분할

    각 몫 = amount / n 을 최소 단위로 내린 뒤 잔여 단위를 결제자부터 배분.
    어떤 몫도 amount / n 과 최소 단위 1개 이상 차이나지 않음.
    """

    @property
    def split_type(self) -> SplitType:
        return SplitType.EQUAL

    def allocate(
        self,
        amount: Decimal,
        participants: Sequence[str],
        payer: str,
        strategy_input: Mapping[str, Decimal],
    ) -> list[Allocation]:
        n = len(participants)
        base = floor_money(amount / n, self.settings.currency_places)
        amounts = {member_id: base for member_id in participants}
        distribute_remainder(
            amounts,
            amount,
            _remainder_order(participants, payer),
            self.settings.minor_unit,
        )

        percent = _percent_of(Decimal(1), Decimal(n))
        return [(member_id, amounts[member_id], percent) for member_id in participants]


class CustomSplit(SplitStrategy):
    """금액 지정 분할

    지정 금액 합계가 총액과 허용 오차 이내로 같아야 함.
    """

    @property
    def split_type(self) -> SplitType:
        return SplitType.CUSTOM

    def allocate(
        self,
        amount: Decimal,
        participants: Sequence[str],
        payer: str,
        strategy_input: Mapping[str, Decimal],
    ) -> list[Allocation]:
        values = self._require_inputs(participants, strategy_input)

        total_custom = sum(values.values(), ZERO)
        if not is_close(total_custom, amount, self.settings.tolerance):
            raise InvalidSplitError(
                InvalidSplitReason.AMOUNT_MISMATCH,
                f"custom amounts must sum to total (sum={total_custom}, total={amount})",
            )

        return [
            (member_id, values[member_id], _percent_of(values[member_id], amount))
            for member_id in participants
        ]


class PercentSplit(SplitStrategy):
    """비율 분할

    비율 합계가 100과 허용 오차 이내로 같아야 함.
    합계가 정확히 100이 아니면 합계 기준으로 환산:
    금액 = percent / Σpercent * amount 를 최소 단위로 내린 뒤,
    잔여 단위는 비율이 0보다 큰 구성원에게만 결제자부터 배분.
    """

    @property
    def split_type(self) -> SplitType:
        return SplitType.PERCENT

    def allocate(
        self,
        amount: Decimal,
        participants: Sequence[str],
        payer: str,
        strategy_input: Mapping[str, Decimal],
    ) -> list[Allocation]:
        values = self._require_inputs(participants, strategy_input)

        total_percent = sum(values.values(), ZERO)
        if total_percent <= 0 or not is_close(total_percent, Percent.WHOLE, self.settings.tolerance):
            raise InvalidSplitError(
                InvalidSplitReason.PERCENT_MISMATCH,
                f"percentages must add up to 100 (sum={total_percent})",
            )

        amounts = {
            member_id: floor_money(
                values[member_id] / total_percent * amount,
                self.settings.currency_places,
            )
            for member_id in participants
        }
        # 0% 구성원은 잔여 배분 대상에서 제외
        order = [m for m in _remainder_order(participants, payer) if values[m] > 0]
        distribute_remainder(amounts, amount, order, self.settings.minor_unit)

        return [(member_id, amounts[member_id], values[member_id]) for member_id in participants]


class SplitCalculator:
    """지출을 구성원별 몫으로 변환

    분할 방식별 SplitStrategy를 호출하여 몫을 생성.
    결제자 본인의 몫은 항상 settled=True (자기 자신에 대한 채무는 없음).

    사용 예시:
    ```python
    calculator = SplitCalculator(settings)

    shares = calculator.calculate(
        expense_id="exp-1",
        amount=Decimal("90.00"),
        paid_by="alice",
        split_type=SplitType.EQUAL,
        participants=["alice", "bob", "carol"],
    )
    # alice 30.00 (settled), bob 30.00, carol 30.00
    ```
    """

    def __init__(self, settings: LedgerSettings | None = None):
        self.settings = settings or LedgerSettings()
        self._strategies: dict[SplitType, SplitStrategy] = {
            strategy.split_type: strategy
            for strategy in (
                EqualSplit(self.settings),
                CustomSplit(self.settings),
                PercentSplit(self.settings),
            )
        }

    def strategy_for(self, split_type: SplitType | str) -> SplitStrategy:
        """분할 방식에 해당하는 전략 반환

        Raises:
            UnknownStrategyError: 지원하지 않는 방식
        """
        try:
            key = SplitType(split_type)
        except ValueError as e:
            raise UnknownStrategyError(split_type) from e

        strategy = self._strategies.get(key)
        if strategy is None:
            raise UnknownStrategyError(split_type)
        return strategy

    def calculate(
        self,
        expense_id: str,
        amount: Decimal | int | str,
        paid_by: str,
        split_type: SplitType | str,
        participants: Sequence[str] | None = None,
        strategy_input: Mapping[str, Decimal | int | str] | None = None,
    ) -> list[ExpenseShare]:
        """지출 1건의 몫 계산

        Args:
            expense_id: 지출 ID
            amount: 지출 총액 (> 0)
            paid_by: 결제자 ID
            split_type: 분할 방식
            participants: 참여자 ID 목록 (None이면 strategy_input의 키 순서)
            strategy_input: custom 금액 또는 percent 비율 (구성원 ID → 값)

        Returns:
            참여자 순서의 ExpenseShare 목록

        Raises:
            MalformedAmountError: 숫자로 해석할 수 없는 금액/입력
            AmountMustBePositiveError: amount <= 0
            EmptyParticipantSetError: 참여자 없음
            InvalidSplitError: 참여자 중복, 합계 불일치 등
            UnknownStrategyError: 지원하지 않는 분할 방식
        """
        total = _parse_amount(amount)
        if total <= 0:
            raise AmountMustBePositiveError(amount)

        inputs = {
            member_id: _parse_amount(value)
            for member_id, value in (strategy_input or {}).items()
        }

        if participants is None:
            participants = list(inputs)
        if not participants:
            raise EmptyParticipantSetError()

        duplicates = sorted({p for p in participants if participants.count(p) > 1})
        if duplicates:
            raise InvalidSplitError(
                InvalidSplitReason.DUPLICATE_PARTICIPANT,
                f"participants must be unique (duplicates={duplicates})",
            )

        strategy = self.strategy_for(split_type)
        allocations = strategy.allocate(total, participants, paid_by, inputs)

        shares = [
            ExpenseShare(
                share_id=f"{expense_id}:{member_id}",
                expense_id=expense_id,
                member_id=member_id,
                amount=share_amount,
                percent=percent,
                settled=member_id == paid_by,
            )
            for member_id, share_amount, percent in allocations
        ]

        logger.debug(
            f"Splits calculated: expense={expense_id} type={strategy.split_type.value} "
            f"participants={len(shares)} total={total}"
        )
        return shares
