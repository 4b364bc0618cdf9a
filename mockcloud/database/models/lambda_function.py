from sqlalchemy import Column, Integer, String
from ..database import Base
from .mixins import OwnedResourceMixin

class Lambda(OwnedResourceMixin, Base):
    """
    요청이 들어올 때만 실행되는 서버리스 함수의 메타데이터입니다.
    AWS의 'Lambda Function'에 해당합니다.
    """
    __tablename__ = "lambdas"
    MUTABLE_FIELDS = ("name", "concurrent_limit")

    name = Column(String(200), nullable=False)
    concurrent_limit = Column(Integer, nullable=False)
