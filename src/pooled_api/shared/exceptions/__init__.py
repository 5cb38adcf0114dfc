"""
목적: 예외 모듈 공개 API를 제공한다.
설명: 예외 모델, 베이스 클래스, DB 도메인 예외와 에러 매퍼를 노출한다.
디자인 패턴: 퍼사드
참조: src/pooled_api/shared/exceptions/base.py, src/pooled_api/shared/exceptions/errors.py
"""

from pooled_api.shared.exceptions.base import BaseAppException
from pooled_api.shared.exceptions.errors import (
    ConnectionFailedError,
    ConnectionReleaseError,
    DatabaseError,
    NoRowsError,
    PoolClosedError,
    PoolExhaustedError,
    QueryFailedError,
    RowDecodeError,
)
from pooled_api.shared.exceptions.mapper import ErrorResponse, map_error
from pooled_api.shared.exceptions.models import ExceptionDetail

__all__ = [
    "BaseAppException",
    "ExceptionDetail",
    "DatabaseError",
    "PoolExhaustedError",
    "PoolClosedError",
    "ConnectionFailedError",
    "ConnectionReleaseError",
    "QueryFailedError",
    "NoRowsError",
    "RowDecodeError",
    "ErrorResponse",
    "map_error",
]
