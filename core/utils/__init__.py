"""
유틸리티 패키지

금액 정규화/비교, 타임존 처리 등 공통 유틸리티
"""

from core.utils.money import (
    floor_money,
    is_close,
    minor_unit,
    quantize_money,
    to_decimal,
)
from core.utils.timezone import ensure_utc, now_utc

__all__ = [
    "floor_money",
    "is_close",
    "minor_unit",
    "quantize_money",
    "to_decimal",
    "ensure_utc",
    "now_utc",
]
