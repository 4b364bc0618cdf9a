from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from mockcloud.services.exceptions import StoreError


@contextmanager
def translate_store_errors(db: Session, action: str):
    """SQLAlchemy 오류를 롤백한 뒤 StoreError 로 바꿔 올립니다. 원인은 __cause__ 로 남습니다."""
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        raise StoreError(f"Store failure while {action}.") from e
