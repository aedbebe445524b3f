"""
서비스 레이어

사실 피드 → 원장 엔진 → 결과를 잇는 비동기 오케스트레이션.
"""

from services.balance_service import BalanceService
from services.bootstrap import LedgerServices, configure_logging, create_services
from services.expense_service import ExpenseService

__all__ = [
    "BalanceService",
    "ExpenseService",
    "LedgerServices",
    "configure_logging",
    "create_services",
]
