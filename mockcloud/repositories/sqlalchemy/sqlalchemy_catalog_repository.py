from typing import List
from sqlalchemy.orm import Session
from mockcloud.database import models
from mockcloud.repositories.interfaces import ICatalogRepository
from mockcloud.repositories.sqlalchemy.store_errors import translate_store_errors

class SqlalchemyCatalogRepository(ICatalogRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def list_available(self) -> List[models.Resource]:
        with translate_store_errors(self.db, "listing resource catalog"):
            return self.db.query(models.Resource).filter(
                models.Resource.available.is_(True)
            ).order_by(models.Resource.name.asc()).all()
