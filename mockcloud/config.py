# mockcloud/config.py
import json
import os
from logging import CRITICAL, DEBUG, ERROR, INFO, WARNING
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

CONFIG_FILE_ENV = "CONFIG_FILE"
DEFAULT_CONFIG_PATH = Path("conf.json")


class Config(BaseModel):
    """
    서비스 실행에 필요한 설정 값.

    시작 시점에 한 번만 생성되며, 필요한 컴포넌트에 인자로 전달됩니다.
    """
    db_connection: str = Field(min_length=1)
    bind_address: str
    jwt_secret: str = Field(min_length=1)
    token_ttl_hours: int = Field(default=24, gt=0)
    log_level: int = INFO
    db_retry_interval_seconds: float = Field(default=1.0, gt=0)
    db_retry_timeout_seconds: float = Field(default=60.0, gt=0)

    @field_validator("log_level", mode="before")
    @classmethod
    def convert_log_level(cls, value):
        if isinstance(value, int):
            return value
        log_levels = {
            "DEBUG": DEBUG,
            "INFO": INFO,
            "WARNING": WARNING,
            "ERROR": ERROR,
            "CRITICAL": CRITICAL,
        }
        return log_levels.get(str(value).upper(), INFO)

    @field_validator("bind_address")
    @classmethod
    def check_bind_address(cls, value: str) -> str:
        # "host:port" 또는 ":port" 형태만 허용
        _, sep, port = value.rpartition(":")
        if not sep or not port.isdigit() or not 0 < int(port) < 65536:
            raise ValueError(f"bind_address must look like 'host:port', got '{value}'")
        return value

    @property
    def host(self) -> str:
        return self.bind_address.rpartition(":")[0]

    @property
    def port(self) -> int:
        return int(self.bind_address.rpartition(":")[2])


def load_config(config_file: Optional[Union[str, os.PathLike]] = None) -> Config:
    """
    JSON 설정 파일을 읽어 Config 객체를 생성합니다.

    Args:
        config_file: 설정 파일 경로. 생략하면 CONFIG_FILE 환경 변수,
            그마저 없으면 ./conf.json 을 사용합니다.

    Raises:
        OSError: 파일을 열 수 없을 때.
        ValueError: JSON 형식이 잘못되었거나 필수 값이 누락/잘못되었을 때.
    """
    path = Path(config_file or os.environ.get(CONFIG_FILE_ENV) or DEFAULT_CONFIG_PATH)
    with path.open("r", encoding="utf-8") as f:
        config_data = json.load(f)
    return Config(**config_data)
