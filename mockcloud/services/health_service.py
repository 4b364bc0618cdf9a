import logging

from mockcloud.repositories.interfaces import IHealthRepository
from mockcloud.services.exceptions import StoreError

logger = logging.getLogger(__name__)


class HealthService:
    def __init__(self, health_repo: IHealthRepository):
        self.health_repo = health_repo

    def is_ready(self) -> bool:
        """
        데이터베이스 연결 상태를 확인합니다.
        실패는 로그로 남기고 False 를 반환할 뿐, 예외를 밖으로 던지지 않습니다.
        """
        try:
            self.health_repo.ping()
        except StoreError as e:
            logger.error("Error with database connection: %s", e.__cause__ or e)
            return False
        return True
