"""
메모리 어댑터

Protocol 준수하여 실제 저장소 구현체와 교체 가능.
"""

from adapters.memory.fact_store import FactStoreState, InMemoryFactStore

__all__ = [
    "FactStoreState",
    "InMemoryFactStore",
]
