"""
서비스 테스트 픽스처

구성원이 등록된 메모리 저장소와 서비스 인스턴스 제공.
"""

import pytest

from adapters.memory.fact_store import InMemoryFactStore
from core.config.loader import LedgerSettings
from services.balance_service import BalanceService
from services.expense_service import ExpenseService


@pytest.fixture
def store(alice, bob, carol) -> InMemoryFactStore:
    """alice, bob, carol이 가입한 group-1"""
    store = InMemoryFactStore()
    for member in (alice, bob, carol):
        store.add_member("group-1", member)
    return store


@pytest.fixture
def balance_service(store: InMemoryFactStore, settings: LedgerSettings) -> BalanceService:
    return BalanceService(store, store, store, settings)


@pytest.fixture
def expense_service(store: InMemoryFactStore, settings: LedgerSettings) -> ExpenseService:
    return ExpenseService(store, store, settings)
