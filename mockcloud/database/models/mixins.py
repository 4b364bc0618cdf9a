from typing import Tuple

from sqlalchemy import Column, DateTime, ForeignKey, String, func
from sqlalchemy.orm import declared_attr


class TimestampMixin:
    """
    생성/수정 시각과 소프트 삭제 시각을 가지는 테이블 공통 컬럼.
    deleted_at 이 채워진 행은 모든 조회에서 제외되지만 실제로 지워지지는 않습니다.
    """
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), nullable=False)
    deleted_at = Column(DateTime, nullable=True)


class OwnedResourceMixin(TimestampMixin):
    """
    특정 사용자가 소유하는 리소스 테이블의 공통 컬럼.

    하위 클래스는 MUTABLE_FIELDS 에 생성/수정 시 클라이언트가 바꿀 수 있는
    컬럼 이름을 나열합니다. 소유자(user_id)는 생성 이후 바뀌지 않습니다.
    """
    MUTABLE_FIELDS: Tuple[str, ...] = ()

    id = Column(String(36), primary_key=True)

    @declared_attr
    def user_id(cls):
        return Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
