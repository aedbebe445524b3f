"""
pytest 공통 fixture 정의

설정 파일, 싱글턴 초기화, 기본 구성원 fixture
"""

import logging
import tempfile
from pathlib import Path

import pytest

from core.config.loader import LedgerSettings, Settings
from core.ledger.models import Member


@pytest.fixture
def temp_dir() -> Path:
    """OS 독립적인 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_settings_file(temp_dir: Path) -> Path:
    """테스트용 settings.yaml 파일 생성"""
    settings_content = """# 테스트용 settings.yaml
ledger:
  currency_places: 2
  tolerance: "0.01"

logging:
  level: debug
"""
    settings_path = temp_dir / "settings.yaml"
    settings_path.write_text(settings_content, encoding="utf-8")
    return settings_path


@pytest.fixture
def temp_settings_file_zero_places(temp_dir: Path) -> Path:
    """소수 자릿수 0 (원 단위) settings.yaml"""
    settings_content = """ledger:
  currency_places: 0
  tolerance: "1"
"""
    settings_path = temp_dir / "settings_krw.yaml"
    settings_path.write_text(settings_content, encoding="utf-8")
    return settings_path


@pytest.fixture
def temp_settings_file_invalid(temp_dir: Path) -> Path:
    """잘못된 값의 settings.yaml 파일 생성"""
    settings_content = """ledger:
  currency_places: -1
  tolerance: "0.01"
"""
    settings_path = temp_dir / "settings_invalid.yaml"
    settings_path.write_text(settings_content, encoding="utf-8")
    return settings_path


@pytest.fixture(autouse=True)
def reset_settings_singleton():
    """테스트 간 Settings 싱글턴 격리"""
    Settings.reset()
    yield
    Settings.reset()


@pytest.fixture
def settings() -> LedgerSettings:
    """기본 원장 설정"""
    return LedgerSettings()


@pytest.fixture
def alice() -> Member:
    return Member(member_id="alice", name="Alice", email="alice@example.com")


@pytest.fixture
def bob() -> Member:
    return Member(member_id="bob", name="Bob")


@pytest.fixture
def carol() -> Member:
    return Member(member_id="carol", name="Carol")


@pytest.fixture
def dave() -> Member:
    return Member(member_id="dave", name="Dave")


@pytest.fixture
def restore_root_logger():
    """setup_logging이 추가한 핸들러 정리"""
    root = logging.getLogger()
    existing = set(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler in existing:
            continue
        root.removeHandler(handler)
        handler.close()
    root.setLevel(level)
