"""
목적: pytest 공통 로깅 훅과 가짜 DB 드라이버 픽스처를 제공한다.
설명: 테스트 시작/종료와 결과를 로깅하고, 실제 PostgreSQL 없이 풀/API를 검증할 수 있는 가짜 커넥션 관리자를 제공한다.
디자인 패턴: 테스트 훅, 테스트 더블
참조: pyproject.toml, src/pooled_api/integrations/db/base/manager.py
"""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence

import pytest
from dotenv import load_dotenv

from pooled_api.integrations.db.base.manager import BaseConnectionManager, Row

_LOGGER = logging.getLogger("tests")

USERS: Dict[int, Dict[str, Any]] = {
    1: {"id": 1, "name": "Ann", "age": 30},
    2: {"id": 2, "name": "Bob", "age": 41},
}


def _load_env_files() -> None:
    """프로젝트 루트 .env가 있으면 로딩한다."""

    root = Path(__file__).resolve().parents[1]
    env_path = root / ".env"
    if env_path.exists():
        load_dotenv(env_path, override=False)


def _set_if_missing(key: str, value: str | None) -> None:
    """환경 변수가 없을 때만 값을 설정한다."""

    if not value:
        return
    if not os.getenv(key):
        os.environ[key] = value


def _build_postgres_dsn() -> str | None:
    """POSTGRES_* 환경 변수로 PostgreSQL DSN을 조합한다."""

    user = os.getenv("POSTGRES_USER")
    password = os.getenv("POSTGRES_PW")
    host = os.getenv("POSTGRES_HOST", "127.0.0.1")
    port = os.getenv("POSTGRES_PORT", "5432")
    database = os.getenv("POSTGRES_DATABASE")
    if not all([user, password, host, port, database]):
        return None
    return f"postgresql://{user}:{password}@{host}:{port}/{database}"


_load_env_files()
_set_if_missing("POSTGRES_DSN", _build_postgres_dsn())


def users_table_resolver(query: str, params: Sequence[Any]) -> List[Row]:
    """users 테이블을 흉내 내는 기본 쿼리 해석기."""

    if "WHERE id" in query:
        raw_id = str(params[0])
        return [dict(row) for key, row in USERS.items() if str(key) == raw_id]
    return [dict(USERS[1])]


class FakeConnection:
    """쿼리와 종료 여부를 기록하는 가짜 드라이버 커넥션."""

    def __init__(self, manager: "FakeConnectionManager") -> None:
        self._manager = manager
        self.closed = False
        self.broken = False
        self.queries: List[tuple] = []

    async def fetch(self, query: str, params: Sequence[Any] = ()) -> List[Row]:
        self.queries.append((query, tuple(params)))
        if self.closed or self.broken:
            raise ConnectionError("connection is not usable")
        if query == "SELECT 1":
            return [{"?column?": 1}]
        if self._manager.query_delay:
            await asyncio.sleep(self._manager.query_delay)
        return self._manager.resolver(query, params)

    async def close(self) -> None:
        self.closed = True


class FakeConnectionManager(BaseConnectionManager[FakeConnection]):
    """생성한 커넥션을 모두 기억하는 가짜 커넥션 관리자."""

    def __init__(
        self,
        resolver: Optional[Callable[[str, Sequence[Any]], List[Row]]] = None,
        query_delay: float = 0.0,
    ) -> None:
        self.resolver = resolver or users_table_resolver
        self.query_delay = query_delay
        self.connect_error: Optional[BaseException] = None
        self.validate_error: Optional[BaseException] = None
        self.validate_gate: Optional[asyncio.Event] = None
        self.created: List[FakeConnection] = []

    @property
    def name(self) -> str:
        return "fake"

    async def connect(self) -> FakeConnection:
        await asyncio.sleep(0)
        if self.connect_error is not None:
            raise self.connect_error
        connection = FakeConnection(self)
        self.created.append(connection)
        return connection

    async def is_valid(self, connection: FakeConnection) -> bool:
        if self.validate_gate is not None:
            await self.validate_gate.wait()
        if self.validate_error is not None:
            raise self.validate_error
        return await super().is_valid(connection)


@pytest.fixture
def fake_manager() -> FakeConnectionManager:
    """users 테이블을 흉내 내는 가짜 커넥션 관리자를 반환한다."""

    return FakeConnectionManager()


@pytest.fixture
def make_fake_manager() -> Callable[..., FakeConnectionManager]:
    """옵션을 받아 가짜 커넥션 관리자를 만드는 팩토리를 반환한다."""

    return FakeConnectionManager


def pytest_sessionstart(session) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 세션 시작을 로깅한다."""

    _LOGGER.info("테스트 세션 시작")


def pytest_sessionfinish(session, exitstatus: int) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 세션 종료를 로깅한다."""

    _LOGGER.info("테스트 세션 종료 (exitstatus=%s)", exitstatus)


def pytest_runtest_logstart(nodeid: str, location) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """각 테스트 시작을 로깅한다."""

    _LOGGER.info("테스트 시작: %s", nodeid)


def pytest_runtest_logreport(report) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 결과를 로깅한다."""

    if report.when != "call":
        return
    if report.passed:
        _LOGGER.info("테스트 완료: %s", report.nodeid)
        return
    if report.skipped:
        _LOGGER.warning("테스트 스킵: %s", report.nodeid)
        return
    _LOGGER.error("테스트 실패: %s", report.nodeid)
