"""
목적: PostgreSQL 커넥션 관리자를 제공한다.
설명: psycopg 3 비동기 커넥션을 열고, 행을 컬럼 이름 기반 dict로 돌려주는 어댑터로 감싼다.
디자인 패턴: 어댑터 패턴
참조: src/pooled_api/integrations/db/base/manager.py
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

import psycopg
from psycopg import pq
from psycopg.rows import dict_row

from pooled_api.integrations.db.base.manager import BaseConnectionManager, Row
from pooled_api.shared.logging import Logger, create_default_logger


class PostgresConnection:
    """psycopg AsyncConnection 어댑터."""

    def __init__(self, connection: psycopg.AsyncConnection) -> None:
        self._connection = connection

    @property
    def raw(self) -> psycopg.AsyncConnection:
        """드라이버 커넥션을 반환한다."""

        return self._connection

    @property
    def closed(self) -> bool:
        return bool(self._connection.closed)

    @property
    def transaction_status(self) -> pq.TransactionStatus:
        """서버 트랜잭션 상태를 반환한다."""

        return self._connection.info.transaction_status

    async def fetch(self, query: str, params: Sequence[Any] = ()) -> List[Row]:
        # 값은 항상 드라이버 바인딩으로 전달한다.
        async with self._connection.cursor(row_factory=dict_row) as cursor:
            await cursor.execute(query, tuple(params) or None)
            if cursor.description is None:
                return []
            return list(await cursor.fetchall())

    async def rollback(self) -> None:
        """열린 트랜잭션을 되돌린다."""

        await self._connection.rollback()

    async def close(self) -> None:
        await self._connection.close()


class PostgresConnectionManager(BaseConnectionManager[PostgresConnection]):
    """PostgreSQL 커넥션 관리자 구현체."""

    def __init__(
        self,
        dsn: Optional[str] = None,
        host: str = "127.0.0.1",
        port: int = 5432,
        user: str = "postgres",
        password: Optional[str] = None,
        database: str = "postgres",
        application_name: str = "pooled_api",
        connect_timeout: Optional[int] = 10,
        logger: Optional[Logger] = None,
    ) -> None:
        if not dsn:
            auth = user if not password else f"{user}:{password}"
            dsn = f"postgresql://{auth}@{host}:{port}/{database}"
        self._dsn = dsn
        self._application_name = application_name
        self._connect_timeout = connect_timeout
        self._logger = logger or create_default_logger("PostgresConnectionManager")

    @property
    def name(self) -> str:
        return "postgres"

    async def connect(self) -> PostgresConnection:
        kwargs: dict[str, Any] = {"application_name": self._application_name}
        if self._connect_timeout:
            kwargs["connect_timeout"] = self._connect_timeout
        connection = await psycopg.AsyncConnection.connect(
            self._dsn,
            autocommit=True,
            **kwargs,
        )
        self._logger.debug("PostgreSQL 커넥션이 열렸습니다.")
        return PostgresConnection(connection)

    async def is_valid(self, connection: PostgresConnection) -> bool:
        if connection.closed:
            return False
        try:
            if connection.transaction_status in (
                pq.TransactionStatus.INTRANS,
                pq.TransactionStatus.INERROR,
            ):
                await connection.rollback()
            await connection.fetch("SELECT 1")
        except psycopg.Error as error:
            self._logger.warning(f"PostgreSQL 커넥션 검증 실패: {error}")
            return False
        return True

    def has_broken(self, connection: PostgresConnection) -> bool:
        if connection.closed:
            return True
        return connection.transaction_status == pq.TransactionStatus.UNKNOWN
