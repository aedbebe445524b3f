"""
어댑터 레이어

외부 협력자(사실 저장소, 사용자 조회)와의 연동을 담당.
Protocol 기반 인터페이스로 Mock 교체 가능.
"""

from adapters.interfaces import (
    IFactFeed,
    IFactWriter,
    IUserDirectory,
    MemberNotFoundError,
)

__all__ = [
    # Interfaces
    "IFactFeed",
    "IFactWriter",
    "IUserDirectory",
    # Errors
    "MemberNotFoundError",
]
