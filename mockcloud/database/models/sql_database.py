from sqlalchemy import Column, Integer, String
from ..database import Base
from .mixins import OwnedResourceMixin

class SQLDatabase(OwnedResourceMixin, Base):
    """
    관계형 데이터베이스 인스턴스의 메타데이터입니다.
    접속용 password 는 입력된 그대로 저장되며 응답에는 절대 포함되지 않습니다.
    """
    __tablename__ = "sql_databases"
    MUTABLE_FIELDS = ("name", "username", "password", "quantity")

    name = Column(String(200), nullable=False)
    username = Column(String(100), nullable=False)
    password = Column(String(200), nullable=False)
    quantity = Column(Integer, nullable=False)
