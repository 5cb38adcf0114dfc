"""
목적: 요청 하나가 독점하는 커넥션 대여 토큰을 제공한다.
설명: async with 스코프가 끝나면 정상 종료/예외/취소와 관계없이 정확히 한 번 풀에 반환한다.
디자인 패턴: 스코프 기반 자원 관리, 프록시 패턴
참조: src/pooled_api/integrations/db/pool/pool.py, src/pooled_api/api/dependencies/connection.py
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional, Sequence

from pooled_api.integrations.db.base.manager import Row
from pooled_api.shared.exceptions import ConnectionReleaseError

if TYPE_CHECKING:
    from pooled_api.integrations.db.pool.pool import ConnectionPool
    from pooled_api.integrations.db.pool.pooled import PooledConnection


class ScopedConnection:
    """대여된 커넥션 한 개에 대한 일회용 토큰.

    반환은 스코프 종료(__aexit__)가 맡는다. 반환은 동기 호출이라 취소 중에도 끊기지 않는다.
    """

    def __init__(self, pool: "ConnectionPool", pooled: "PooledConnection") -> None:
        self._pool = pool
        self._pooled = pooled
        self._released = False

    @property
    def connection_id(self) -> int:
        """풀 내부 커넥션 식별자를 반환한다."""

        return self._pooled.connection_id

    @property
    def released(self) -> bool:
        """반환 여부를 반환한다."""

        return self._released

    @property
    def connection(self) -> Any:
        """드라이버 커넥션을 반환한다."""

        if self._released:
            raise ConnectionReleaseError("반환된 커넥션은 사용할 수 없습니다.", self.connection_id)
        return self._pooled.raw

    async def fetch(self, query: str, params: Sequence[Any] = ()) -> List[Row]:
        """대여한 커넥션으로 쿼리를 실행한다."""

        return await self.connection.fetch(query, params)

    def release(self, healthy: Optional[bool] = None) -> None:
        """커넥션을 풀에 반환한다.

        Args:
            healthy: None이면 커넥션 관리자의 파손 판정을 따른다.

        Raises:
            ConnectionReleaseError: 이미 반환된 토큰인 경우.
        """

        if self._released:
            raise ConnectionReleaseError("이미 반환된 커넥션입니다.", self.connection_id)
        self._released = True
        if healthy is None:
            healthy = not self._pool.manager.has_broken(self._pooled.raw)
        self._pool.release(self._pooled, healthy=healthy)

    async def __aenter__(self) -> "ScopedConnection":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if not self._released:
            self.release()
