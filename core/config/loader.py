"""
설정 로더

settings.yaml 로드 및 원장 엔진 설정 생성
"""

from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from typing import Any

import yaml

from core.constants import Defaults, Paths
from core.utils.money import minor_unit, to_decimal

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class LedgerSettings:
    """원장 엔진 설정 (settings.yaml에서 로드)

    불변 데이터 구조로 설정 변경 방지
    """

    currency_places: int = Defaults.CURRENCY_PLACES
    tolerance: Decimal = Defaults.TOLERANCE
    log_level: str = Defaults.LOG_LEVEL

    @property
    def minor_unit(self) -> Decimal:
        """최소 통화 단위 (currency_places=2 → 0.01)"""
        return minor_unit(self.currency_places)


class SettingsLoadError(Exception):
    """Settings 로드 실패 예외"""

    pass


def _parse_ledger_section(section: dict[str, Any]) -> tuple[int, Decimal]:
    """ledger 섹션 검증 및 변환"""
    places = section.get("currency_places", Defaults.CURRENCY_PLACES)
    if not isinstance(places, int) or isinstance(places, bool) or places < 0:
        raise SettingsLoadError(
            f"ledger.currency_places는 0 이상의 정수여야 합니다: {places!r}"
        )

    raw_tolerance = section.get("tolerance", Defaults.TOLERANCE)
    try:
        tolerance = to_decimal(raw_tolerance)
    except ValueError as e:
        raise SettingsLoadError(f"ledger.tolerance 파싱 실패: {e}") from e

    if tolerance < 0:
        raise SettingsLoadError(
            f"ledger.tolerance는 음수일 수 없습니다: {raw_tolerance!r}"
        )

    return places, tolerance


def load_settings(path: Path | None = None) -> LedgerSettings:
    """settings.yaml 파일 로드

    Args:
        path: settings.yaml 경로 (None이면 기본 경로 사용,
              기본 경로에 파일이 없으면 기본값 반환)

    Returns:
        LedgerSettings 인스턴스

    Raises:
        SettingsLoadError: 명시한 파일이 없거나 형식/값이 잘못된 경우
    """
    if path is None:
        path = Paths.SETTINGS_FILE
        if not path.exists():
            return LedgerSettings()

    if not path.exists():
        raise SettingsLoadError(f"settings.yaml 파일을 찾을 수 없습니다: {path}")

    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise SettingsLoadError(f"settings.yaml 파싱 실패: {e}") from e

    if data is None:
        return LedgerSettings()

    if not isinstance(data, dict):
        raise SettingsLoadError("settings.yaml 최상위는 매핑이어야 합니다")

    ledger_section = data.get("ledger") or {}
    logging_section = data.get("logging") or {}
    if not isinstance(ledger_section, dict) or not isinstance(logging_section, dict):
        raise SettingsLoadError("settings.yaml의 ledger/logging 섹션은 매핑이어야 합니다")

    places, tolerance = _parse_ledger_section(ledger_section)

    log_level = str(logging_section.get("level", Defaults.LOG_LEVEL)).upper()
    if log_level not in VALID_LOG_LEVELS:
        raise SettingsLoadError(
            f"유효하지 않은 logging.level입니다: '{log_level}'. "
            f"유효한 값: {list(VALID_LOG_LEVELS)}"
        )

    return LedgerSettings(
        currency_places=places,
        tolerance=tolerance,
        log_level=log_level,
    )


class Settings:
    """애플리케이션 설정 (싱글턴 패턴)

    settings.yaml을 한 번만 로드하고 이후 같은 인스턴스 제공
    """

    _instance: "Settings | None" = None
    _ledger: LedgerSettings | None = None

    def __new__(cls, settings_path: Path | None = None) -> "Settings":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, settings_path: Path | None = None) -> None:
        if self._ledger is None:
            type(self)._ledger = load_settings(settings_path)

    @property
    def ledger(self) -> LedgerSettings:
        """원장 엔진 설정"""
        assert self._ledger is not None
        return self._ledger

    @classmethod
    def reset(cls) -> None:
        """싱글턴 인스턴스 초기화 (테스트용)"""
        cls._instance = None
        cls._ledger = None


def get_settings(settings_path: Path | None = None) -> LedgerSettings:
    """LedgerSettings 반환

    Args:
        settings_path: settings.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        싱글턴에 캐시된 LedgerSettings
    """
    return Settings(settings_path).ledger
