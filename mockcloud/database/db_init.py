import logging
import uuid

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from .database import Base, create_session_factory
from .models import Resource

logger = logging.getLogger(__name__)

# (표시 이름, 타입) - 타입 값은 API 경로의 단수형과 맞춥니다.
DEFAULT_CATALOG = (
    ("Lambda", "lambda"),
    ("Virtual Machine", "virtual-machine"),
    ("SQL Database", "sql-database"),
    ("NoSQL Database", "nosql-database"),
)


def initialize_db(engine: Engine) -> None:
    """
    테이블을 생성하고, 카탈로그가 비어 있으면 기본 리소스 종류를 채워 넣습니다.

    Raises:
        SQLAlchemyError: 테이블 생성이나 기본 데이터 삽입에 실패했을 때.
    """
    logger.info("Initializing database schema...")

    # 모든 테이블을 생성합니다. (이미 존재하면 생성하지 않음)
    Base.metadata.create_all(bind=engine)

    db = create_session_factory(engine)()
    try:
        if db.query(Resource).first():
            logger.info("Resource catalog already populated, skipping seed.")
            return

        for name, resource_type in DEFAULT_CATALOG:
            db.add(Resource(id=str(uuid.uuid4()), name=name, type=resource_type, available=True))
        db.commit()
        logger.info("Seeded resource catalog with %d entries.", len(DEFAULT_CATALOG))

    except SQLAlchemyError:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    from mockcloud.config import load_config
    from mockcloud.database.database import create_db_engine
    from mockcloud.utils.logging_config import configure_logging

    config = load_config()
    configure_logging(config.log_level)
    initialize_db(create_db_engine(config.db_connection))
