from dataclasses import dataclass
from typing import Any, Dict, Tuple, Type

from pydantic import BaseModel

from mockcloud.database import models
from mockcloud.database.models.mixins import OwnedResourceMixin
from mockcloud.schemas import LambdaInput, NoSQLDatabaseInput, SQLDatabaseInput, VirtualMachineInput


@dataclass(frozen=True)
class ResourceKind:
    """
    사용자 소유 리소스 한 종류를 설명합니다.

    Attributes:
        path: API 경로 조각. (예: 'lambdas' -> /lambdas, /lambdas/{id})
        label: 로그와 응답 메시지에 쓰이는 이름.
        model: 저장에 쓰이는 SQLAlchemy 모델. MUTABLE_FIELDS 를 가집니다.
        schema: 생성/수정 요청 본문을 검증할 pydantic 모델.
        public_fields: 응답에 포함되는 필드. id 는 항상 포함되고
            소유자, 비밀번호, 타임스탬프는 포함되지 않습니다.
    """
    path: str
    label: str
    model: Type[OwnedResourceMixin]
    schema: Type[BaseModel]
    public_fields: Tuple[str, ...]

    def serialize(self, instance) -> Dict[str, Any]:
        data = {"id": instance.id}
        for field in self.public_fields:
            data[field] = getattr(instance, field)
        return data


LAMBDA = ResourceKind(
    path="lambdas",
    label="Lambda",
    model=models.Lambda,
    schema=LambdaInput,
    public_fields=("name", "concurrent_limit"),
)

VIRTUAL_MACHINE = ResourceKind(
    path="virtual-machines",
    label="Virtual machine",
    model=models.VirtualMachine,
    schema=VirtualMachineInput,
    public_fields=("name", "cpus", "quantity"),
)

SQL_DATABASE = ResourceKind(
    path="sql-databases",
    label="SQL database",
    model=models.SQLDatabase,
    schema=SQLDatabaseInput,
    public_fields=("name", "username", "quantity"),
)

NOSQL_DATABASE = ResourceKind(
    path="nosql-databases",
    label="NoSQL database",
    model=models.NoSQLDatabase,
    schema=NoSQLDatabaseInput,
    public_fields=("name", "shards"),
)

RESOURCE_KINDS = (LAMBDA, VIRTUAL_MACHINE, SQL_DATABASE, NOSQL_DATABASE)
