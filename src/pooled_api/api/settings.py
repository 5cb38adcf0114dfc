"""
목적: 애플리케이션 실행 설정을 정의한다.
설명: DB 접속 문자열, 수신 주소, 풀 설정을 프로세스 시작 시 한 번 읽어 고정한다.
디자인 패턴: 설정 객체
참조: src/pooled_api/shared/config/loader.py, src/pooled_api/integrations/db/base/models.py
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from pooled_api.integrations.db.base.models import PoolConfig
from pooled_api.shared.config import ConfigLoader

# 접두사 없이 흔히 쓰이는 환경 변수 이름.
_ENV_ALIASES = {
    "POSTGRES_DSN": "database_url",
    "DATABASE_URL": "database_url",
}


class AppSettings(BaseModel):
    """애플리케이션 설정 모델이다.

    Args:
        database_url: PostgreSQL 접속 문자열.
        host: HTTP 수신 주소.
        port: HTTP 수신 포트.
        pool: 커넥션 풀 설정.
    """

    model_config = ConfigDict(frozen=True)

    database_url: Optional[str] = None
    host: str = "127.0.0.1"
    port: int = Field(default=3000, ge=1, le=65535)
    pool: PoolConfig = Field(default_factory=PoolConfig)


def load_settings(
    overrides: Optional[Mapping[str, Any]] = None,
    config_file: Optional[str] = None,
) -> AppSettings:
    """환경 변수와 설정 파일을 병합해 설정을 만든다.

    우선순위: 별칭 환경 변수 < JSON 파일 < ``POOLED_API__`` 환경 변수 < overrides.
    """

    data = (
        ConfigLoader()
        .add_env_aliases(_ENV_ALIASES)
        .add_json_file(config_file)
        .add_env()
        .build(overrides)
    )
    return AppSettings.model_validate(data)
