"""
목적: 드라이버 커넥션 관리자 인터페이스를 정의한다.
설명: 풀은 커넥션 생성/검증/파손 판정/종료를 이 인터페이스에 위임하고 드라이버 세부 사항을 모른다.
디자인 패턴: 전략 패턴, 어댑터 패턴
참조: src/pooled_api/integrations/db/engines/postgres.py, src/pooled_api/integrations/db/pool/pool.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, List, Mapping, Protocol, Sequence, TypeVar

Row = Mapping[str, Any]


class DatabaseConnection(Protocol):
    """쿼리 실행기가 사용하는 최소 커넥션 프로토콜."""

    @property
    def closed(self) -> bool:
        ...

    async def fetch(self, query: str, params: Sequence[Any] = ()) -> List[Row]:
        ...

    async def close(self) -> None:
        ...


ConnectionT = TypeVar("ConnectionT", bound=DatabaseConnection)


class BaseConnectionManager(ABC, Generic[ConnectionT]):
    """커넥션 관리자 인터페이스."""

    @property
    @abstractmethod
    def name(self) -> str:
        """관리자 이름을 반환한다."""

    @abstractmethod
    async def connect(self) -> ConnectionT:
        """새 커넥션을 연다."""

    async def is_valid(self, connection: ConnectionT) -> bool:
        """재사용 전에 커넥션이 살아 있는지 확인한다."""

        try:
            await connection.fetch("SELECT 1")
        except Exception:  # noqa: BLE001 - 검증 실패는 폐기 신호로만 쓴다
            return False
        return True

    def has_broken(self, connection: ConnectionT) -> bool:
        """반환 시점에 커넥션이 이미 망가졌는지 동기적으로 판정한다."""

        return bool(connection.closed)

    async def close(self, connection: ConnectionT) -> None:
        """커넥션을 닫는다."""

        await connection.close()
