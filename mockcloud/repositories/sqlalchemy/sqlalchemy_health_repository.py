from sqlalchemy import text
from sqlalchemy.orm import Session
from mockcloud.repositories.interfaces import IHealthRepository
from mockcloud.repositories.sqlalchemy.store_errors import translate_store_errors

class SqlalchemyHealthRepository(IHealthRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def ping(self) -> None:
        with translate_store_errors(self.db, "checking database connection"):
            self.db.execute(text("SELECT 1"))
