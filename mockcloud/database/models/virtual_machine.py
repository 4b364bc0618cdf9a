from sqlalchemy import Column, Integer, String
from ..database import Base
from .mixins import OwnedResourceMixin

class VirtualMachine(OwnedResourceMixin, Base):
    """
    사용자가 요청한 가상 머신 묶음의 메타데이터입니다.
    같은 스펙(cpus)의 인스턴스를 quantity 개만큼 요청한 것으로 취급합니다.
    """
    __tablename__ = "virtual_machines"
    MUTABLE_FIELDS = ("name", "cpus", "quantity")

    name = Column(String(200), nullable=False)
    cpus = Column(Integer, nullable=False)
    quantity = Column(Integer, nullable=False)
