import logging
import time

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_delay,
    wait_fixed,
)

logger = logging.getLogger(__name__)

# 모든 모델 클래스가 상속받을 Base 클래스
Base = declarative_base()


def create_db_engine(db_url: str) -> Engine:
    """
    연결 문자열로 SQLAlchemy 엔진을 생성합니다.

    SQLite의 경우 WSGI 서버의 여러 스레드에서 연결을 공유할 수 있도록
    check_same_thread 검사를 끕니다.
    """
    connect_args = {}
    if db_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(db_url, connect_args=connect_args, pool_pre_ping=True)


def create_session_factory(engine: Engine) -> sessionmaker:
    """요청마다 하나씩 세션을 만들기 위한 팩토리. commit은 리포지토리가 명시적으로 호출합니다."""
    return sessionmaker(autoflush=False, bind=engine)


def connect_with_retry(db_url: str, interval_seconds: float = 1.0, timeout_seconds: float = 60.0) -> Engine:
    """
    데이터베이스가 응답할 때까지 일정 간격으로 연결을 재시도합니다.

    Args:
        db_url: SQLAlchemy 연결 문자열.
        interval_seconds: 재시도 간격(초).
        timeout_seconds: 이 시간이 지나면 재시도를 포기합니다.

    Returns:
        연결 확인이 끝난 엔진.

    Raises:
        SQLAlchemyError: 제한 시간 안에 연결하지 못했을 때 마지막 오류를 그대로 전달합니다.
    """
    engine = create_db_engine(db_url)
    started = time.monotonic()

    @retry(
        retry=retry_if_exception_type(SQLAlchemyError),
        wait=wait_fixed(interval_seconds),
        stop=stop_after_delay(timeout_seconds),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
    def _ping():
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    _ping()
    logger.info("Successfully connected to database in %.2fs", time.monotonic() - started)
    return engine
