from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

class IOwnedResourceRepository(ABC):
    """
    사용자 소유 리소스(람다, VM, SQL/NoSQL DB)에 공통으로 적용되는 저장소 계약.
    모든 메서드는 owner_id 로 범위가 제한되며, 다른 사용자의 행에는 절대 접근하지 않습니다.
    """

    @abstractmethod
    def create(self, owner_id: str, fields: Dict[str, Any]):
        """새 ID를 발급하여 owner_id 소유의 리소스를 생성하고, 생성된 모델을 반환합니다."""
        pass

    @abstractmethod
    def list(self, owner_id: str, resource_id: Optional[str] = None) -> List[Any]:
        """
        owner_id 가 소유한, 삭제되지 않은 리소스 목록을 조회합니다.

        Args:
            owner_id: 소유자(인증된 사용자)의 ID.
            resource_id: 주어지면 해당 ID의 리소스만 (최대 1개) 조회합니다.

        Returns:
            모델 객체의 리스트. 결과가 없으면 빈 리스트.
        """
        pass

    @abstractmethod
    def update(self, owner_id: str, resource_id: str, fields: Dict[str, Any]) -> Optional[Any]:
        """변경 가능한 필드를 갱신합니다. 일치하는 행이 없으면 None 을 반환합니다."""
        pass

    @abstractmethod
    def delete(self, owner_id: str, resource_id: str) -> bool:
        """
        리소스를 소프트 삭제(deleted_at 기록)합니다.
        소유한 행이 없으면 False, 이미 삭제된 행이면 아무것도 바꾸지 않고 True 를 반환합니다.
        """
        pass
