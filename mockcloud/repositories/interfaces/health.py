from abc import ABC, abstractmethod

class IHealthRepository(ABC):
    @abstractmethod
    def ping(self) -> None:
        """데이터베이스에 간단한 쿼리를 보내 연결을 확인합니다. 실패 시 StoreError."""
        pass
