"""
원장 엔진 예외

모든 검증 실패는 호출 시점에 동기적으로 발생하며 내부 재시도 없음.
엔진은 공유 상태가 없으므로 어떤 예외도 치명적이지 않음.
"""

from core.ledger.types import InvalidSplitReason


class LedgerError(Exception):
    """원장 엔진 기본 예외"""

    pass


class ValidationError(LedgerError):
    """호출자 입력 오류

    금액 <= 0, 빈 참여자 목록, 분할 합계 불일치, 자기 자신에게 정산 등
    """

    pass


class AmountMustBePositiveError(ValidationError):
    """금액이 0 이하"""

    def __init__(self, amount: object):
        self.amount = amount
        super().__init__(f"amount must be greater than 0: {amount}")


class EmptyParticipantSetError(ValidationError):
    """분할 참여자 없음"""

    def __init__(self) -> None:
        super().__init__("at least one participant is required")


class UnknownStrategyError(ValidationError):
    """지원하지 않는 분할 방식"""

    def __init__(self, split_type: object):
        self.split_type = split_type
        super().__init__(f"unknown split strategy: {split_type!r}")


class SelfSettlementError(ValidationError):
    """송금자와 수취인이 동일한 정산"""

    def __init__(self, member_id: str):
        self.member_id = member_id
        super().__init__(f"settlement sender and receiver must differ: {member_id}")


class InvalidSplitError(ValidationError):
    """분할 계산 검증 실패

    Attributes:
        reason: 실패 사유 (금액 불일치 / 비율 불일치 등)
    """

    def __init__(self, reason: InvalidSplitReason, message: str):
        self.reason = reason
        super().__init__(message)


class MalformedAmountError(ValidationError):
    """숫자로 해석할 수 없는 금액/비율 입력"""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"amount is not a finite number: {value!r}")
