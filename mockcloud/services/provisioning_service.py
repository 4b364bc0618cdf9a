import logging
from typing import Any, Dict, List

from mockcloud.repositories.interfaces import IOwnedResourceRepository
from mockcloud.services.exceptions import ResourceNotFoundError
from mockcloud.services.resource_kinds import ResourceKind

logger = logging.getLogger(__name__)


class ProvisioningService:
    """
    한 종류의 사용자 소유 리소스에 대한 생성/조회/수정/삭제를 제공합니다.

    리소스 종류마다 인스턴스를 하나씩 만들어 사용하며, 모든 메서드의 owner_id 는
    검증된 토큰에서 꺼낸 사용자 ID여야 합니다. 클라이언트가 보낸 값은 쓰지 않습니다.
    """

    def __init__(self, kind: ResourceKind, repo: IOwnedResourceRepository):
        self.kind = kind
        self.repo = repo

    def create(self, owner_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        """
        검증된 필드로 새 리소스를 생성합니다.

        Returns:
            서버가 발급한 id 와 공개 필드를 담은 딕셔너리.
        """
        created = self.repo.create(owner_id, fields)
        logger.info("Created %s %s for user %s", self.kind.label, created.id, owner_id)
        return self.kind.serialize(created)

    def list(self, owner_id: str) -> List[Dict[str, Any]]:
        """owner_id 가 소유한, 삭제되지 않은 리소스 전체를 조회합니다."""
        return [self.kind.serialize(r) for r in self.repo.list(owner_id)]

    def get(self, owner_id: str, resource_id: str) -> Dict[str, Any]:
        """
        ID로 특정 리소스를 조회합니다.

        Raises:
            ResourceNotFoundError: 해당 ID의 리소스가 없거나, 삭제되었거나, 다른 사용자의 것일 때.
        """
        found = self.repo.list(owner_id, resource_id)
        if not found:
            raise ResourceNotFoundError(f"{self.kind.label} '{resource_id}' not found.")
        return self.kind.serialize(found[0])

    def update(self, owner_id: str, resource_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        """
        리소스의 변경 가능한 필드를 모두 교체합니다.

        Raises:
            ResourceNotFoundError: 갱신된 행이 하나도 없을 때.
        """
        updated = self.repo.update(owner_id, resource_id, fields)
        if updated is None:
            raise ResourceNotFoundError(f"{self.kind.label} '{resource_id}' not found.")
        logger.info("Updated %s %s for user %s", self.kind.label, resource_id, owner_id)
        return self.kind.serialize(updated)

    def delete(self, owner_id: str, resource_id: str) -> bool:
        """
        리소스를 소프트 삭제합니다. 이미 삭제된 자신의 리소스를 다시 삭제하는 것은 오류가 아닙니다.

        Raises:
            ResourceNotFoundError: 해당 ID의 리소스가 없거나 다른 사용자의 것일 때.
        """
        if not self.repo.delete(owner_id, resource_id):
            raise ResourceNotFoundError(f"{self.kind.label} '{resource_id}' not found.")
        logger.info("Deleted %s %s for user %s", self.kind.label, resource_id, owner_id)
        return True
