"""
목적: 요청 단위 커넥션 주입 의존성을 제공한다.
설명: 디스패처가 핸들러 본문보다 먼저 호출하며, 풀에서 커넥션을 대여해 핸들러에 넘기고 요청이 끝나면 반환한다.
디자인 패턴: 의존성 주입, 스코프 기반 자원 관리
참조: src/pooled_api/integrations/db/pool/scoped.py, src/pooled_api/api/app.py
"""

from __future__ import annotations

from typing import AsyncIterator

from fastapi import Request

from pooled_api.core.users import UserQueryExecutor
from pooled_api.integrations.db.base.pool import BaseConnectionPool
from pooled_api.integrations.db.pool.scoped import ScopedConnection
from pooled_api.shared.exceptions import PoolClosedError
from pooled_api.shared.logging import LogContext, create_default_logger

_LOGGER = create_default_logger("ConnectionExtractor")


def get_connection_pool(request: Request) -> BaseConnectionPool:
    """앱이 소유한 커넥션 풀을 반환한다.

    lifespan 시작 전이거나 종료 후라 풀이 없으면 PoolClosedError를 던진다.
    """

    pool = getattr(request.app.state, "pool", None)
    if pool is None:
        raise PoolClosedError()
    return pool


def get_user_query_executor(request: Request) -> UserQueryExecutor:
    """앱이 소유한 사용자 쿼리 실행기를 반환한다."""

    return request.app.state.executor


async def get_scoped_connection(request: Request) -> AsyncIterator[ScopedConnection]:
    """요청 하나가 독점하는 커넥션을 대여한다.

    대여에 실패하면 예외가 그대로 올라가 핸들러 본문은 실행되지 않는다.
    반환은 async with 스코프 종료가 맡으므로 정상 응답, 예외, 취소 모두에서 한 번 일어난다.
    """

    pool = get_connection_pool(request)
    async with pool.connection() as scoped:
        logger = _LOGGER.with_context(
            LogContext(
                method=request.method,
                path=request.url.path,
                connection_id=scoped.connection_id,
            )
        )
        logger.debug("요청 커넥션 대여")
        try:
            yield scoped
        finally:
            logger.debug("요청 스코프 종료")
