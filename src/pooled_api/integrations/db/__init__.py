"""
목적: DB 통합 모듈 공개 API를 제공한다.
설명: 공통 모델, 커넥션 풀, 드라이버 커넥션 관리자를 노출한다.
디자인 패턴: 퍼사드
참조: src/pooled_api/integrations/db/pool, src/pooled_api/integrations/db/engines
"""

from .base import (
    BaseConnectionManager,
    BaseConnectionPool,
    DatabaseConnection,
    PoolConfig,
    PoolState,
    QueryDescriptor,
    Row,
)
from .engines import PostgresConnection, PostgresConnectionManager
from .pool import ConnectionPool, PooledConnection, ScopedConnection

__all__ = [
    "BaseConnectionManager",
    "BaseConnectionPool",
    "DatabaseConnection",
    "PoolConfig",
    "PoolState",
    "QueryDescriptor",
    "Row",
    "ConnectionPool",
    "PooledConnection",
    "ScopedConnection",
    "PostgresConnection",
    "PostgresConnectionManager",
]
