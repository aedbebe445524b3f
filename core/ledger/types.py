"""
원장 타입 정의

분할 방식, 카테고리, 검증 실패 사유 등 원장 엔진에서 사용하는 Enum 정의
모든 Enum은 str을 상속하여 문자열 직렬화 가능
"""

from enum import Enum


class SplitType(str, Enum):
    """지출 분할 방식"""

    EQUAL = "equal"
    CUSTOM = "custom"
    PERCENT = "percent"


class ExpenseCategory(str, Enum):
    """지출 카테고리

    표시용 분류. 금액 계산에는 영향 없음.
    """

    FOOD_AND_DINING = "Food & Dining"
    TRANSPORTATION = "Transportation"
    ACCOMMODATION = "Accommodation"
    OFFICE_SUPPLIES = "Office Supplies"
    SOFTWARE_AND_TOOLS = "Software & Tools"
    ENTERTAINMENT = "Entertainment"
    TRAVEL = "Travel"
    UTILITIES = "Utilities"
    MARKETING = "Marketing"
    OTHER = "Other"


class InvalidSplitReason(str, Enum):
    """분할 검증 실패 사유"""

    AMOUNT_MISMATCH = "AMOUNT_MISMATCH"  # custom 금액 합계 != 총액
    PERCENT_MISMATCH = "PERCENT_MISMATCH"  # 비율 합계 != 100
    PARTICIPANT_MISMATCH = "PARTICIPANT_MISMATCH"  # 입력 대상 != 참여자 목록
    DUPLICATE_PARTICIPANT = "DUPLICATE_PARTICIPANT"  # 참여자 중복
    NEGATIVE_SHARE = "NEGATIVE_SHARE"  # 음수 금액/비율
