from sqlalchemy import Column, Index, String, text
from ..database import Base
from .mixins import TimestampMixin

class User(TimestampMixin, Base):
    """
    시스템에 가입하고 리소스를 소유하는 사용자를 나타냅니다.
    비밀번호는 솔트가 포함된 단방향 해시로만 저장됩니다.
    사용자 이름은 삭제되지 않은 사용자들 사이에서만 고유합니다.
    """
    __tablename__ = "users"
    __table_args__ = (
        Index(
            "uq_users_active_username",
            "username",
            unique=True,
            sqlite_where=text("deleted_at IS NULL"),
            postgresql_where=text("deleted_at IS NULL"),
        ),
    )
    id = Column(String(36), primary_key=True)
    username = Column(String(50), nullable=False)
    password_hash = Column(String(255), nullable=False)
