import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    """루트 로거에 콘솔 핸들러를 한 번만 설정합니다."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    # SQLAlchemy 엔진 로그는 필요할 때만 켭니다.
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
