"""
목적: shared 패키지의 공개 API를 제공한다.
설명: 하위 공통 모듈(예외, 로깅, 설정)에 대한 접근 포인트를 제공한다.
디자인 패턴: 퍼사드
참조: src/pooled_api/shared/exceptions, src/pooled_api/shared/logging, src/pooled_api/shared/config
"""

from __future__ import annotations

from pooled_api.shared.exceptions import BaseAppException, ExceptionDetail, map_error
from pooled_api.shared.logging import (
    InMemoryLogger,
    LogContext,
    LogLevel,
    LogRecord,
    Logger,
    LogRepository,
    create_default_logger,
)

__all__ = [
    "BaseAppException",
    "ExceptionDetail",
    "map_error",
    "LogContext",
    "LogLevel",
    "LogRecord",
    "Logger",
    "LogRepository",
    "InMemoryLogger",
    "create_default_logger",
]
