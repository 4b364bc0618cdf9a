from abc import ABC, abstractmethod
from typing import Optional
from mockcloud.database import models

class IUserRepository(ABC):
    @abstractmethod
    def create(self, user_model: models.User) -> models.User:
        """새로운 사용자를 데이터베이스에 생성합니다. ID가 없으면 새로 발급합니다."""
        pass

    @abstractmethod
    def find_by_id(self, user_id: str) -> Optional[models.User]:
        """고유 ID로 삭제되지 않은 사용자를 조회합니다."""
        pass

    @abstractmethod
    def find_by_username(self, username: str) -> Optional[models.User]:
        """사용자 이름으로 삭제되지 않은 사용자를 조회합니다."""
        pass
