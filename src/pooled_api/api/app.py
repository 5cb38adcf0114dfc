"""
목적: FastAPI 앱 팩토리를 제공한다.
설명: 앱 수명주기(lifespan)에 커넥션 풀을 만들고 닫으며, 풀은 app.state에 명시적으로 주입한다.
디자인 패턴: 팩토리 패턴, 의존성 주입
참조: src/pooled_api/api/main.py, src/pooled_api/integrations/db/pool/pool.py
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from pooled_api.api.health.routers import router as health_router
from pooled_api.api.settings import AppSettings, load_settings
from pooled_api.api.users.routers import handle_app_exception
from pooled_api.api.users.routers import router as users_router
from pooled_api.core.users import UserQueryExecutor
from pooled_api.integrations.db.base.manager import BaseConnectionManager
from pooled_api.integrations.db.engines import PostgresConnectionManager
from pooled_api.integrations.db.pool import ConnectionPool
from pooled_api.shared.exceptions import BaseAppException
from pooled_api.shared.logging import Logger, create_default_logger


def build_connection_manager(settings: AppSettings) -> BaseConnectionManager:
    """설정으로부터 PostgreSQL 커넥션 관리자를 만든다."""

    if not settings.database_url:
        raise ValueError("database_url(POSTGRES_DSN) 설정이 필요합니다.")
    return PostgresConnectionManager(dsn=settings.database_url)


def create_app(
    settings: Optional[AppSettings] = None,
    manager: Optional[BaseConnectionManager] = None,
    logger: Optional[Logger] = None,
) -> FastAPI:
    """FastAPI 앱을 만든다.

    Args:
        settings: 실행 설정. 없으면 환경 변수에서 읽는다.
        manager: 드라이버 커넥션 관리자. 없으면 settings.database_url로 PostgreSQL 관리자를 만든다.
        logger: 주입 가능한 로거.
    """

    settings = settings or load_settings()
    logger = logger or create_default_logger("pooled_api")

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """앱 시작 시 풀을 열고 종료 시 닫는다."""

        pool = ConnectionPool(
            manager or build_connection_manager(settings),
            config=settings.pool,
            logger=logger,
        )
        await pool.open()
        app.state.pool = pool
        try:
            yield
        finally:
            app.state.pool = None
            await pool.close()

    app = FastAPI(title="pooled_api", lifespan=lifespan)
    app.state.settings = settings
    app.state.pool = None
    app.state.executor = UserQueryExecutor(logger=logger)
    app.add_exception_handler(BaseAppException, handle_app_exception)
    app.include_router(health_router)
    app.include_router(users_router)
    return app
