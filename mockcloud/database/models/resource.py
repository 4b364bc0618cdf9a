from sqlalchemy import Boolean, Column, String
from ..database import Base

class Resource(Base):
    """
    프로비저닝 가능한 리소스 종류의 카탈로그입니다. (예: 'Lambda', 'SQL Database')
    운영자가 미리 채워 두며 API 로는 읽기만 가능합니다. 소유자가 없습니다.
    """
    __tablename__ = "resources"
    id = Column(String(36), primary_key=True)
    name = Column(String(100), nullable=False)
    type = Column(String(50), unique=True, nullable=False)
    available = Column(Boolean, nullable=False, default=True)
