"""
목적: 비동기 커넥션 풀 구현체를 제공한다.
설명: 최대 크기가 고정된 커넥션 집합을 동시 요청 사이에서 공유하고, FIFO 대기열로 대여 순서를 보장한다.
디자인 패턴: 오브젝트 풀
참조: src/pooled_api/integrations/db/base/pool.py, src/pooled_api/integrations/db/pool/scoped.py
"""

from __future__ import annotations

import asyncio
import itertools
import time
from collections import deque
from typing import Any, Deque, Dict, Optional, Set

from pooled_api.integrations.db.base.manager import BaseConnectionManager
from pooled_api.integrations.db.base.models import PoolConfig, PoolState
from pooled_api.integrations.db.base.pool import BaseConnectionPool
from pooled_api.integrations.db.pool.pooled import PooledConnection
from pooled_api.integrations.db.pool.scoped import ScopedConnection
from pooled_api.shared.exceptions import (
    BaseAppException,
    ConnectionFailedError,
    ConnectionReleaseError,
    PoolClosedError,
    PoolExhaustedError,
)
from pooled_api.shared.logging import Logger, create_default_logger

# 대기자에게 커넥션 대신 "새로 만들 자리"를 넘길 때 쓰는 토큰.
_SLOT = object()


class ConnectionPool(BaseConnectionPool):
    """asyncio 기반 커넥션 풀 구현체.

    유휴 커넥션은 LIFO로 재사용한다. 가장 최근에 반환된 커넥션을 먼저 내주므로
    덜 쓰인 커넥션은 idle_timeout에 걸려 자연스럽게 정리된다.

    공유 상태(_idle, _in_use, _total, _waiters)는 이벤트 루프 위에서 await 없이
    이어지는 동기 구간에서만 변경한다. 루프가 단일 스레드이므로 각 구간이 하나의
    임계 구역이 되고, checkout/release 단계가 서로 끼어들 수 없다.

    Args:
        manager: 드라이버 커넥션 관리자.
        config: 풀 설정.
        logger: 주입 가능한 로거.
    """

    def __init__(
        self,
        manager: BaseConnectionManager,
        config: Optional[PoolConfig] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        self._manager = manager
        self._config = config or PoolConfig()
        self._logger = logger or create_default_logger("ConnectionPool")
        self._idle: Deque[PooledConnection] = deque()
        self._in_use: Dict[int, PooledConnection] = {}
        self._waiters: Deque[asyncio.Future] = deque()
        self._total = 0
        self._closed = False
        self._ids = itertools.count(1)
        self._drained: Optional[asyncio.Event] = None
        self._closing: Set[asyncio.Task] = set()
        # 유휴 목록에서 꺼내 검증 중인 커넥션 수. 유휴도 대여 중도 아니다.
        self._validating = 0

    @property
    def config(self) -> PoolConfig:
        """풀 설정을 반환한다."""

        return self._config

    @property
    def manager(self) -> BaseConnectionManager:
        """커넥션 관리자를 반환한다."""

        return self._manager

    @property
    def closed(self) -> bool:
        """풀 종료 여부를 반환한다."""

        return self._closed

    def state(self) -> PoolState:
        """풀 상태 스냅샷을 반환한다."""

        return PoolState(
            connections=self._total,
            idle_connections=len(self._idle),
            in_use=len(self._in_use),
            waiters=sum(1 for waiter in self._waiters if not waiter.done()),
            max_size=self._config.max_size,
            closed=self._closed,
        )

    async def open(self) -> None:
        """min_idle 개수만큼 커넥션을 미리 만든다."""

        if self._closed:
            raise PoolClosedError()
        while self._total < self._config.min_idle:
            self._total += 1
            pooled = await self._create_in_slot()
            self._return_idle(pooled)
        self._logger.info(
            f"커넥션 풀 준비 완료: manager={self._manager.name}, "
            f"max_size={self._config.max_size}, idle={len(self._idle)}"
        )

    async def checkout(self) -> ScopedConnection:
        """커넥션을 대여한다.

        Raises:
            PoolExhaustedError: connection_timeout 안에 커넥션을 얻지 못한 경우.
            PoolClosedError: 풀이 종료된 경우.
            ConnectionFailedError: 새 커넥션 생성에 실패한 경우.
        """

        pooled = await self._acquire()
        self._logger.debug(f"커넥션 대여: id={pooled.connection_id}, in_use={len(self._in_use)}")
        return ScopedConnection(self, pooled)

    def release(self, connection: PooledConnection, healthy: bool = True) -> None:
        """대여 중인 커넥션을 반환한다.

        healthy가 False이면 커넥션을 닫고 자리를 비운다. 비운 자리는 첫 대기자에게 넘어간다.

        Raises:
            ConnectionReleaseError: 대여 중이 아닌 커넥션을 반환한 경우. 풀 상태는 바뀌지 않는다.
        """

        connection_id = getattr(connection, "connection_id", None)
        if connection_id is None or self._in_use.get(connection_id) is not connection:
            raise ConnectionReleaseError("대여 중이 아닌 커넥션입니다.", connection_id)
        del self._in_use[connection_id]

        now = time.monotonic()
        if not healthy or connection.is_expired(now, self._config.max_lifetime):
            self._logger.debug(f"커넥션 폐기: id={connection_id}, healthy={healthy}")
            self._discard(connection)
        else:
            connection.last_used_at = now
            self._return_idle(connection)
        self._notify_drained()

    async def close(self) -> None:
        """풀을 종료한다.

        대기 중인 checkout은 PoolClosedError로 끝난다. 대여 중인 커넥션은 drain_timeout 동안
        반환을 기다리고, 그 뒤에 반환되는 커넥션은 반환 즉시 닫힌다. 이미 종료된 풀에서 다시 호출하면
        늦게 예약된 종료 작업을 기다린다.
        """

        if self._closed:
            await self._await_closing()
            return
        self._closed = True
        while self._waiters:
            waiter = self._waiters.popleft()
            if not waiter.done():
                waiter.set_exception(PoolClosedError())

        if (self._in_use or self._validating) and self._config.drain_timeout > 0:
            self._drained = asyncio.Event()
            try:
                await asyncio.wait_for(self._drained.wait(), timeout=self._config.drain_timeout)
            except asyncio.TimeoutError:
                self._logger.warning(
                    f"커넥션 반환 대기 시간 초과: in_use={len(self._in_use)}, 반환 시 종료합니다."
                )

        while self._idle:
            pooled = self._idle.pop()
            self._total -= 1
            await self._close_raw(pooled)
        await self._await_closing()
        self._logger.info(f"커넥션 풀 종료 완료: remaining={self._total}")

    async def _acquire(self) -> PooledConnection:
        loop = asyncio.get_running_loop()
        deadline = loop.time() + self._config.connection_timeout
        while True:
            if self._closed:
                raise PoolClosedError()
            if not self._waiters:
                pooled = self._pop_idle()
                if pooled is not None:
                    self._validating += 1
                    try:
                        valid = await self._validate(pooled)
                    finally:
                        self._validating -= 1
                        self._notify_drained()
                    if self._closed:
                        if valid:
                            self._discard(pooled)
                        raise PoolClosedError()
                    if valid:
                        return self._lend(pooled)
                    continue
                if self._total < self._config.max_size:
                    self._total += 1
                    return self._lend(await self._create_in_slot())

            token = await self._wait(deadline)
            if self._closed:
                # 넘겨받은 직후 풀이 닫혔다.
                if token is _SLOT:
                    self._free_slot()
                else:
                    self._discard(token)
                raise PoolClosedError()
            if token is _SLOT:
                return self._lend(await self._create_in_slot())
            return self._lend(token)

    async def _wait(self, deadline: float) -> Any:
        loop = asyncio.get_running_loop()
        waiter = loop.create_future()
        self._waiters.append(waiter)
        try:
            done, _ = await asyncio.wait({waiter}, timeout=max(0.0, deadline - loop.time()))
        except BaseException:
            self._abandon(waiter)
            raise
        if not done:
            self._abandon(waiter)
            self._logger.warning(
                f"커넥션 대기 시간 초과: timeout={self._config.connection_timeout}, "
                f"in_use={len(self._in_use)}"
            )
            raise PoolExhaustedError(self._config.connection_timeout, self._config.max_size)
        return waiter.result()

    def _abandon(self, waiter: asyncio.Future) -> None:
        """타임아웃/취소된 대기자를 정리하고, 이미 넘겨받은 자원은 풀로 되돌린다."""

        try:
            self._waiters.remove(waiter)
        except ValueError:
            pass
        if not waiter.done():
            waiter.cancel()
            return
        if waiter.cancelled() or waiter.exception() is not None:
            return
        token = waiter.result()
        if token is _SLOT:
            self._free_slot()
        else:
            self._return_idle(token)

    def _next_waiter(self) -> Optional[asyncio.Future]:
        while self._waiters:
            waiter = self._waiters.popleft()
            if not waiter.done():
                return waiter
        return None

    def _pop_idle(self) -> Optional[PooledConnection]:
        now = time.monotonic()
        while self._idle:
            pooled = self._idle.pop()
            if pooled.is_expired(now, self._config.max_lifetime) or pooled.is_stale(
                now, self._config.idle_timeout
            ):
                self._logger.debug(f"만료된 유휴 커넥션 정리: id={pooled.connection_id}")
                self._discard(pooled)
                continue
            return pooled
        return None

    async def _validate(self, pooled: PooledConnection) -> bool:
        if not self._config.test_on_checkout:
            return True
        try:
            valid = await self._manager.is_valid(pooled.raw)
        except BaseAppException:
            self._discard(pooled)
            raise
        except Exception as error:
            self._discard(pooled)
            self._logger.error(f"커넥션 검증 중 오류: id={pooled.connection_id}, error={error}")
            raise ConnectionFailedError(error) from error
        except BaseException:
            self._discard(pooled)
            raise
        if not valid:
            self._logger.warning(f"유효성 검사 실패로 커넥션 폐기: id={pooled.connection_id}")
            self._discard(pooled)
        return valid

    async def _create_in_slot(self) -> PooledConnection:
        """이미 _total에 잡아 둔 자리에 새 커넥션을 만든다."""

        try:
            raw = await self._manager.connect()
        except BaseAppException:
            self._free_slot()
            raise
        except Exception as error:
            self._free_slot()
            self._logger.error(f"커넥션 생성 실패: {error}")
            raise ConnectionFailedError(error) from error
        except BaseException:
            self._free_slot()
            raise
        pooled = PooledConnection(connection_id=next(self._ids), raw=raw)
        if self._closed:
            self._discard(pooled)
            raise PoolClosedError()
        self._logger.debug(f"커넥션 생성: id={pooled.connection_id}, total={self._total}")
        return pooled

    def _lend(self, pooled: PooledConnection) -> PooledConnection:
        pooled.last_used_at = time.monotonic()
        self._in_use[pooled.connection_id] = pooled
        return pooled

    def _return_idle(self, pooled: PooledConnection) -> None:
        if self._closed:
            self._discard(pooled)
            return
        waiter = self._next_waiter()
        if waiter is not None:
            waiter.set_result(pooled)
            return
        self._idle.append(pooled)

    def _discard(self, pooled: PooledConnection) -> None:
        if self._closed:
            self._logger.debug(f"종료된 풀의 커넥션 정리: id={pooled.connection_id}")
        task = asyncio.get_running_loop().create_task(self._close_raw(pooled))
        self._closing.add(task)
        task.add_done_callback(self._closing.discard)
        self._free_slot()

    def _free_slot(self) -> None:
        waiter = None if self._closed else self._next_waiter()
        if waiter is not None:
            waiter.set_result(_SLOT)
            return
        self._total -= 1

    async def _close_raw(self, pooled: PooledConnection) -> None:
        try:
            await self._manager.close(pooled.raw)
        except Exception as error:  # noqa: BLE001 - 폐기 대상 커넥션의 종료 실패는 기록만 한다
            self._logger.warning(f"커넥션 종료 실패: id={pooled.connection_id}, error={error}")

    def _notify_drained(self) -> None:
        if self._closed and self._drained is not None and not self._in_use and not self._validating:
            self._drained.set()

    async def _await_closing(self) -> None:
        """예약된 커넥션 종료 작업이 모두 끝날 때까지 기다린다."""

        while self._closing:
            await asyncio.gather(*list(self._closing), return_exceptions=True)
