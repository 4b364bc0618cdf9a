import uuid
from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from mockcloud.database import models
from mockcloud.repositories.interfaces import IUserRepository
from mockcloud.repositories.sqlalchemy.store_errors import translate_store_errors
from mockcloud.services.exceptions import UserCreationError

class SqlalchemyUserRepository(IUserRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def create(self, user_model: models.User) -> models.User:
        if not user_model.id:
            user_model.id = str(uuid.uuid4())
        with translate_store_errors(self.db, "creating user"):
            try:
                self.db.add(user_model)
                self.db.commit()
            except IntegrityError as e:
                # 동시에 같은 이름으로 가입한 경우 부분 유니크 인덱스에서 걸립니다.
                self.db.rollback()
                raise UserCreationError(f"Unable to register user '{user_model.username}'.") from e
            self.db.refresh(user_model)
        return user_model

    def find_by_id(self, user_id: str) -> Optional[models.User]:
        with translate_store_errors(self.db, "looking up user"):
            return self.db.query(models.User).filter(
                models.User.id == user_id,
                models.User.deleted_at.is_(None)
            ).first()

    def find_by_username(self, username: str) -> Optional[models.User]:
        with translate_store_errors(self.db, "looking up user"):
            return self.db.query(models.User).filter(
                models.User.username == username,
                models.User.deleted_at.is_(None)
            ).first()
