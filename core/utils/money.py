"""
금액 유틸리티

Decimal 변환, 최소 통화 단위 정규화, 허용 오차 비교.
float는 반드시 str을 거쳐 Decimal로 변환 (이진 부동소수점 오차 방지).
"""

from decimal import ROUND_DOWN, ROUND_HALF_UP, Decimal, InvalidOperation

from core.constants import Defaults


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """임의 숫자 값을 Decimal로 변환

    Args:
        value: Decimal, int, float, str

    Returns:
        Decimal 값

    Raises:
        ValueError: 숫자로 해석할 수 없거나 NaN/Infinity인 경우

    Example:
        >>> to_decimal(0.1)
        Decimal('0.1')
    """
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except (InvalidOperation, ValueError) as e:
            raise ValueError(f"숫자로 변환할 수 없는 값입니다: {value!r}") from e

    if not result.is_finite():
        raise ValueError(f"유한한 숫자가 아닙니다: {value!r}")
    return result


def minor_unit(places: int = Defaults.CURRENCY_PLACES) -> Decimal:
    """최소 통화 단위 (places=2 → Decimal('0.01'))"""
    return Decimal(1).scaleb(-places)


def quantize_money(
    amount: Decimal,
    places: int = Defaults.CURRENCY_PLACES,
    rounding: str = ROUND_HALF_UP,
) -> Decimal:
    """금액을 최소 통화 단위로 정규화"""
    return amount.quantize(minor_unit(places), rounding=rounding)


def floor_money(amount: Decimal, places: int = Defaults.CURRENCY_PLACES) -> Decimal:
    """금액을 최소 통화 단위로 내림 (0 방향)"""
    return quantize_money(amount, places, rounding=ROUND_DOWN)


def is_close(
    a: Decimal,
    b: Decimal,
    tolerance: Decimal = Defaults.TOLERANCE,
) -> bool:
    """허용 오차 이내 동일 여부

    |a - b| <= tolerance
    """
    return abs(a - b) <= tolerance
