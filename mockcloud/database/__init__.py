from .database import Base, connect_with_retry, create_db_engine, create_session_factory
from . import models

__all__ = ["Base", "connect_with_retry", "create_db_engine", "create_session_factory", "models"]
