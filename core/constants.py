"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
중요: 금액/비율 상수는 반드시 Decimal 사용 (float 금지)
"""

from decimal import Decimal
from pathlib import Path


# 프로젝트 루트 (이 파일 기준 2단계 상위: core/constants.py → splitledger/)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent


class Defaults:
    """기본값 상수 (settings.yaml이 없을 때 사용)"""

    # 통화 소수 자릿수 (2 → 0.01 단위)
    CURRENCY_PLACES: int = 2

    # 금액/비율 비교 허용 오차 (최소 통화 단위 1개)
    TOLERANCE: Decimal = Decimal("0.01")

    LOG_LEVEL: str = "INFO"


class Percent:
    """비율 관련 상수"""

    WHOLE: Decimal = Decimal("100")

    # 비율 저장 자릿수 (33.3333%)
    PLACES: int = 4


class Paths:
    """프로젝트 경로 상수 (pathlib 사용 - OS 독립적)"""

    # 디렉토리
    CONFIG_DIR: Path = PROJECT_ROOT / "config"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"

    # 설정 파일
    SETTINGS_FILE: Path = CONFIG_DIR / "settings.yaml"
