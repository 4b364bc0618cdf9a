import uuid
from typing import Any, Dict, List, Optional, Type
from sqlalchemy import func
from sqlalchemy.orm import Query, Session
from mockcloud.database.models.mixins import OwnedResourceMixin
from mockcloud.repositories.interfaces import IOwnedResourceRepository
from mockcloud.repositories.sqlalchemy.store_errors import translate_store_errors

class SqlalchemyOwnedResourceRepository(IOwnedResourceRepository):
    """
    OwnedResourceMixin 을 상속한 모든 모델에 쓰이는 단일 구현체.
    테이블과 변경 가능한 필드 목록은 주입된 모델 클래스에서 가져옵니다.
    """

    def __init__(self, db_session: Session, model: Type[OwnedResourceMixin]):
        self.db = db_session
        self.model = model

    def _owned(self, owner_id: str) -> Query:
        return self.db.query(self.model).filter(self.model.user_id == owner_id)

    def _mutable_values(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        return {name: fields[name] for name in self.model.MUTABLE_FIELDS}

    def create(self, owner_id: str, fields: Dict[str, Any]):
        resource = self.model(id=str(uuid.uuid4()), user_id=owner_id, **self._mutable_values(fields))
        with translate_store_errors(self.db, f"creating {self.model.__tablename__}"):
            self.db.add(resource)
            self.db.commit()
            self.db.refresh(resource)
        return resource

    def list(self, owner_id: str, resource_id: Optional[str] = None) -> List[Any]:
        with translate_store_errors(self.db, f"listing {self.model.__tablename__}"):
            query = self._owned(owner_id).filter(self.model.deleted_at.is_(None))
            if resource_id is not None:
                query = query.filter(self.model.id == resource_id)
            return query.order_by(self.model.created_at.asc(), self.model.id.asc()).all()

    def update(self, owner_id: str, resource_id: str, fields: Dict[str, Any]) -> Optional[Any]:
        values = self._mutable_values(fields)
        values["updated_at"] = func.now()
        with translate_store_errors(self.db, f"updating {self.model.__tablename__}"):
            matched = self._owned(owner_id).filter(
                self.model.id == resource_id,
                self.model.deleted_at.is_(None)
            ).update(values, synchronize_session=False)
            self.db.commit()
        if matched == 0:
            return None
        found = self.list(owner_id, resource_id)
        return found[0] if found else None

    def delete(self, owner_id: str, resource_id: str) -> bool:
        # 이미 삭제된 행은 최초 삭제 시각을 유지합니다.
        with translate_store_errors(self.db, f"deleting {self.model.__tablename__}"):
            matched = self._owned(owner_id).filter(
                self.model.id == resource_id
            ).update(
                {"deleted_at": func.coalesce(self.model.deleted_at, func.now())},
                synchronize_session=False
            )
            self.db.commit()
        return matched > 0
