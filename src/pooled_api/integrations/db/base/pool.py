"""
목적: DB 커넥션 풀 추상화를 제공한다.
설명: 비동기 checkout/반환과 async with 사용을 위한 인터페이스를 정의한다.
디자인 패턴: 오브젝트 풀
참조: src/pooled_api/integrations/db/pool/pool.py, src/pooled_api/integrations/db/pool/scoped.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any, AsyncIterator

from pooled_api.integrations.db.base.models import PoolState

if TYPE_CHECKING:
    from pooled_api.integrations.db.pool.scoped import ScopedConnection


class BaseConnectionPool(ABC):
    """커넥션 풀 인터페이스."""

    @abstractmethod
    async def checkout(self) -> "ScopedConnection":
        """커넥션을 대여한다."""

    @abstractmethod
    def release(self, connection: Any, healthy: bool = True) -> None:
        """대여한 커넥션을 반환한다."""

    @abstractmethod
    def state(self) -> PoolState:
        """풀 상태 스냅샷을 반환한다."""

    @abstractmethod
    async def close(self) -> None:
        """풀을 종료한다."""

    @asynccontextmanager
    async def connection(self) -> AsyncIterator["ScopedConnection"]:
        """대여부터 반환까지를 하나의 스코프로 묶는다."""

        scoped = await self.checkout()
        async with scoped:
            yield scoped
