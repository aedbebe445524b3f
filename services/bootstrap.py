"""
서비스 Bootstrap

설정 로드, 로깅 설정, 의존성 주입.
하나의 LedgerSettings로 엔진 구성요소와 서비스를 구성.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from adapters.memory.fact_store import InMemoryFactStore
from core.config.loader import LedgerSettings, get_settings
from core.logging import setup_logging
from services.balance_service import BalanceService
from services.expense_service import ExpenseService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LedgerServices:
    """구성된 서비스 묶음"""

    settings: LedgerSettings
    balances: BalanceService
    expenses: ExpenseService


def configure_logging(
    settings: LedgerSettings,
    process_name: str = "ledger",
    log_dir: Path | None = None,
) -> logging.Logger:
    """settings.yaml의 logging.level로 콘솔/파일 로깅 설정"""
    level = getattr(logging, settings.log_level)
    return setup_logging(
        process_name,
        console_level=level,
        file_level=level,
        log_dir=log_dir,
    )


def create_services(
    store: InMemoryFactStore | None = None,
    settings: LedgerSettings | None = None,
    settings_path: Path | None = None,
    process_name: str | None = None,
    log_dir: Path | None = None,
) -> LedgerServices:
    """서비스 구성

    Args:
        store: 사실 저장소 (IFactFeed/IUserDirectory/IFactWriter 구현체,
               None이면 새 InMemoryFactStore)
        settings: 원장 설정 (None이면 settings_path 또는 기본 경로에서 로드)
        settings_path: settings.yaml 경로
        process_name: 지정하면 이 이름으로 로깅 설정 (로그 파일명)
        log_dir: 로그 디렉토리 (None이면 Paths.LOGS_DIR)

    Returns:
        LedgerServices
    """
    if settings is None:
        settings = get_settings(settings_path)
    if process_name is not None:
        configure_logging(settings, process_name, log_dir)
    if store is None:
        store = InMemoryFactStore()

    services = LedgerServices(
        settings=settings,
        balances=BalanceService(store, store, store, settings),
        expenses=ExpenseService(store, store, settings),
    )

    logger.info(
        f"Ledger services ready: currency_places={settings.currency_places} "
        f"tolerance={settings.tolerance}"
    )
    return services
