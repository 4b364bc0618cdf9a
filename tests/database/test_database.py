# tests/database/test_database.py
import pytest
from unittest.mock import MagicMock, patch

from sqlalchemy.exc import OperationalError

from mockcloud.database.database import connect_with_retry

def _down():
    return OperationalError("SELECT 1", {}, Exception("connection refused"))

@patch("mockcloud.database.database.create_db_engine")
def test_connect_with_retry_recovers(mock_create_engine: MagicMock):
    """처음 몇 번 연결에 실패해도 제한 시간 안에 성공하면 엔진을 반환합니다."""
    # === Arrange ===
    engine = MagicMock()
    engine.connect.side_effect = [_down(), _down(), MagicMock()]
    mock_create_engine.return_value = engine

    # === Act ===
    result = connect_with_retry("postgresql://db/mockcloud", interval_seconds=0.01, timeout_seconds=5)

    # === Assert ===
    assert result is engine
    assert engine.connect.call_count == 3

@patch("mockcloud.database.database.create_db_engine")
def test_connect_with_retry_gives_up_after_deadline(mock_create_engine: MagicMock):
    """제한 시간이 지나면 마지막 오류를 그대로 올립니다."""
    engine = MagicMock()
    engine.connect.side_effect = _down()
    mock_create_engine.return_value = engine

    with pytest.raises(OperationalError):
        connect_with_retry("postgresql://db/mockcloud", interval_seconds=0.01, timeout_seconds=0.05)

    assert engine.connect.call_count >= 2

def test_connect_with_retry_against_sqlite():
    engine = connect_with_retry("sqlite://", interval_seconds=0.01, timeout_seconds=1)
    try:
        with engine.connect() as conn:
            assert conn is not None
    finally:
        engine.dispose()
