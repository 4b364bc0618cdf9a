from sqlalchemy import Column, Integer, String
from ..database import Base
from .mixins import OwnedResourceMixin

class NoSQLDatabase(OwnedResourceMixin, Base):
    """샤드 수로 규모를 정하는 NoSQL 데이터베이스의 메타데이터입니다."""
    __tablename__ = "nosql_databases"
    MUTABLE_FIELDS = ("name", "shards")

    name = Column(String(200), nullable=False)
    shards = Column(Integer, nullable=False)
