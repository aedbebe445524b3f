"""
어댑터 인터페이스 테스트

Protocol 준수 여부 확인.
"""

from adapters.interfaces import IFactFeed, IFactWriter, IUserDirectory, MemberNotFoundError
from adapters.memory.fact_store import InMemoryFactStore


class TestProtocolCompliance:
    """Protocol 준수 테스트"""

    def test_memory_store_is_fact_feed(self) -> None:
        """InMemoryFactStore가 IFactFeed 준수"""
        assert isinstance(InMemoryFactStore(), IFactFeed)

    def test_memory_store_is_user_directory(self) -> None:
        """InMemoryFactStore가 IUserDirectory 준수"""
        assert isinstance(InMemoryFactStore(), IUserDirectory)

    def test_memory_store_is_fact_writer(self) -> None:
        """InMemoryFactStore가 IFactWriter 준수"""
        assert isinstance(InMemoryFactStore(), IFactWriter)

    def test_plain_object_not_compliant(self) -> None:
        assert not isinstance(object(), IFactFeed)


class TestMemberNotFoundError:
    def test_lookup_error(self) -> None:
        error = MemberNotFoundError("ghost")

        assert isinstance(error, LookupError)
        assert error.member_id == "ghost"
        assert "ghost" in str(error)
