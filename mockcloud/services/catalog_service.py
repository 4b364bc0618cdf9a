from typing import Any, Dict, List

from mockcloud.repositories.interfaces import ICatalogRepository


class CatalogService:
    def __init__(self, catalog_repo: ICatalogRepository):
        self.catalog_repo = catalog_repo

    def list_available(self) -> List[Dict[str, Any]]:
        """인증 없이 조회할 수 있는, 현재 제공 중인 리소스 종류 목록."""
        return [
            {"id": r.id, "name": r.name, "type": r.type}
            for r in self.catalog_repo.list_available()
        ]
