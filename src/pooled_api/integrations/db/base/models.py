"""
목적: 커넥션 풀과 쿼리 실행에 쓰이는 공통 모델을 정의한다.
설명: 풀 설정, 풀 상태 스냅샷, 쿼리 기술자(SQL 본문 + 바인딩 파라미터)를 Pydantic으로 제공한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/pooled_api/integrations/db/pool/pool.py, src/pooled_api/core/users/queries.py
"""

from __future__ import annotations

from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PoolConfig(BaseModel):
    """커넥션 풀 설정 모델이다.

    Args:
        max_size: 동시에 존재할 수 있는 최대 커넥션 수.
        min_idle: open() 시점에 미리 만들어 둘 유휴 커넥션 수.
        connection_timeout: checkout 대기 상한(초). 초과하면 PoolExhaustedError.
        idle_timeout: 유휴 상태로 이 시간(초)을 넘긴 커넥션은 재사용하지 않는다. None이면 무제한.
        max_lifetime: 생성 후 이 시간(초)을 넘긴 커넥션은 재사용하지 않는다. None이면 무제한.
        test_on_checkout: 유휴 커넥션을 내주기 전에 유효성 검사를 할지 여부.
        drain_timeout: close() 시 대여 중인 커넥션 반환을 기다리는 시간(초).
    """

    model_config = ConfigDict(frozen=True)

    max_size: int = Field(default=10, ge=1)
    min_idle: int = Field(default=0, ge=0)
    connection_timeout: float = Field(default=30.0, gt=0)
    idle_timeout: Optional[float] = Field(default=600.0, gt=0)
    max_lifetime: Optional[float] = Field(default=1800.0, gt=0)
    test_on_checkout: bool = True
    drain_timeout: float = Field(default=5.0, ge=0)

    @model_validator(mode="after")
    def _check_min_idle(self) -> "PoolConfig":
        if self.min_idle > self.max_size:
            raise ValueError("min_idle은 max_size보다 클 수 없습니다.")
        return self


class PoolState(BaseModel):
    """풀 상태 스냅샷 모델이다.

    Args:
        connections: 현재 전체 커넥션 수(유휴 + 대여 중 + 생성 중).
        idle_connections: 유휴 커넥션 수.
        in_use: 대여 중인 커넥션 수.
        waiters: checkout 대기 중인 호출자 수.
        max_size: 풀 최대 크기.
        closed: 풀 종료 여부.
    """

    connections: int
    idle_connections: int
    in_use: int
    waiters: int
    max_size: int
    closed: bool


class QueryDescriptor(BaseModel):
    """실행할 쿼리를 기술하는 모델이다.

    SQL 본문에는 값이 들어가지 않는다. 호출자가 준 값은 모두 params로 바인딩된다.

    Args:
        name: 로그/에러 메시지에 쓰는 쿼리 이름.
        text: 드라이버 플레이스홀더(%s)를 포함한 SQL 본문.
        params: 위치 기반 바인딩 파라미터.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    text: str
    params: Tuple[Any, ...] = ()
