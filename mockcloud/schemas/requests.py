from typing import Any, Dict, Type

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from mockcloud.services.exceptions import RequestValidationError


# --------------------------------------------------------------------------
## 인증 요청
# --------------------------------------------------------------------------

class RegisterRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    username: str = Field(min_length=3, max_length=50)
    password: str = Field(min_length=8, max_length=128)


class SignInRequest(BaseModel):
    # 로그인 시에는 길이 규칙을 다시 검사하지 않습니다. (규칙이 바뀌어도 기존 사용자는 로그인 가능)
    model_config = ConfigDict(extra="ignore")

    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


# --------------------------------------------------------------------------
## 리소스 생성/수정 요청 (PUT 은 전체 교체이므로 같은 스키마를 사용)
# --------------------------------------------------------------------------

class ResourceInput(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = Field(min_length=5, max_length=200)


class LambdaInput(ResourceInput):
    concurrent_limit: int = Field(ge=1, le=200, strict=True)


class VirtualMachineInput(ResourceInput):
    cpus: int = Field(ge=1, le=64, strict=True)
    quantity: int = Field(ge=1, le=100, strict=True)


class SQLDatabaseInput(ResourceInput):
    username: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1, max_length=200)
    quantity: int = Field(ge=1, le=100, strict=True)


class NoSQLDatabaseInput(ResourceInput):
    shards: int = Field(ge=1, le=64, strict=True)


def concat_reasons(error: ValidationError) -> str:
    """검증 실패 사유를 'field: 사유' 형태로 쉼표로 이어 붙입니다."""
    reasons = []
    for detail in error.errors():
        field = ".".join(str(part) for part in detail["loc"]) or "body"
        reasons.append(f"{field}: {detail['msg']}")
    return ", ".join(reasons)


def parse_request(schema: Type[BaseModel], data: Any) -> Dict[str, Any]:
    """
    요청 본문을 스키마로 검증하고, 알려진 필드만 담은 딕셔너리를 반환합니다.

    Raises:
        RequestValidationError: 필수 값이 없거나 범위를 벗어났을 때.
    """
    try:
        return schema.model_validate(data).model_dump()
    except ValidationError as e:
        raise RequestValidationError(concat_reasons(e)) from e
