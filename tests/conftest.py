import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from mockcloud.config import Config
from mockcloud.database import Base, create_session_factory
from mockcloud.database.db_init import initialize_db

TEST_SECRET = "test-secret-that-is-long-enough-for-hs256-signing"

@pytest.fixture
def engine():
    """테스트마다 새로 만드는 인메모리 SQLite 엔진. 모든 세션이 같은 연결을 공유합니다."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    initialize_db(engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()

@pytest.fixture
def db_session(engine) -> Session:
    session = create_session_factory(engine)()
    yield session
    session.close()

@pytest.fixture
def config() -> Config:
    return Config(
        db_connection="sqlite://",
        bind_address="127.0.0.1:9090",
        jwt_secret=TEST_SECRET,
    )
