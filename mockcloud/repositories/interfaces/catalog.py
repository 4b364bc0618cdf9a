from abc import ABC, abstractmethod
from typing import List
from mockcloud.database import models

class ICatalogRepository(ABC):
    @abstractmethod
    def list_available(self) -> List[models.Resource]:
        """현재 프로비저닝 가능한 리소스 종류 목록을 조회합니다."""
        pass
