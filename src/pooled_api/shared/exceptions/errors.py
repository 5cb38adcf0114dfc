"""
목적: 커넥션 풀/쿼리 실행 경로의 도메인 예외를 정의한다.
설명: 각 예외는 고정 에러 코드와 재시도 가능 여부를 가진 BaseAppException 하위 클래스다.
디자인 패턴: 도메인 예외 객체
참조: src/pooled_api/shared/exceptions/base.py, src/pooled_api/shared/exceptions/mapper.py
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from pooled_api.shared.exceptions.base import BaseAppException
from pooled_api.shared.exceptions.models import ExceptionDetail


class DatabaseError(BaseAppException):
    """DB 경로 예외의 공통 부모 클래스.

    하위 클래스는 CODE/RETRYABLE/HINT 클래스 속성만 정의한다.
    """

    CODE = "DB_ERROR"
    RETRYABLE = False
    HINT: Optional[str] = None

    def __init__(
        self,
        message: str,
        cause: Optional[str] = None,
        original: Optional[BaseException] = None,
        **metadata: Any,
    ) -> None:
        detail = ExceptionDetail(
            code=self.CODE,
            cause=cause if cause is not None else (str(original) if original else None),
            hint=self.HINT,
            retryable=self.RETRYABLE,
            metadata=metadata,
        )
        super().__init__(message, detail, original)


class PoolExhaustedError(DatabaseError):
    """대기 시간 안에 커넥션을 얻지 못했다."""

    CODE = "DB_POOL_EXHAUSTED"
    RETRYABLE = True
    HINT = "잠시 후 다시 요청하거나 풀 최대 크기를 늘리세요."

    def __init__(self, timeout: float, max_size: int) -> None:
        super().__init__(
            f"커넥션 풀이 고갈되었습니다: {timeout:g}초 안에 커넥션을 얻지 못했습니다.",
            cause=f"max_size={max_size}",
            timeout=timeout,
            max_size=max_size,
        )


class PoolClosedError(DatabaseError):
    """풀이 종료 중이거나 이미 종료되었다."""

    CODE = "DB_POOL_CLOSED"

    def __init__(self) -> None:
        super().__init__("커넥션 풀이 종료되었습니다.")


class ConnectionFailedError(DatabaseError):
    """드라이버가 새 커넥션을 열지 못했다."""

    CODE = "DB_CONNECTION_FAILED"
    RETRYABLE = True
    HINT = "데이터베이스 주소와 인증 정보를 확인하세요."

    def __init__(self, original: BaseException) -> None:
        super().__init__(f"데이터베이스 연결에 실패했습니다: {original}", original=original)


class ConnectionReleaseError(DatabaseError):
    """이미 반환된 커넥션을 다시 반환하거나 사용하려 했다."""

    CODE = "DB_CONNECTION_RELEASE_INVALID"
    HINT = "커넥션 반환은 스코프 종료 시 한 번만 일어나야 합니다."

    def __init__(self, reason: str, connection_id: Optional[int] = None) -> None:
        super().__init__(
            f"잘못된 커넥션 반환입니다: {reason}",
            cause=reason,
            connection_id=connection_id,
        )


class QueryFailedError(DatabaseError):
    """데이터베이스가 쿼리 실행을 거부하거나 실패했다."""

    CODE = "DB_QUERY_FAILED"

    def __init__(self, query_name: str, original: BaseException) -> None:
        super().__init__(
            f"쿼리 실행에 실패했습니다({query_name}): {original}",
            original=original,
            query=query_name,
        )


class NoRowsError(DatabaseError):
    """쿼리는 성공했지만 결과 행이 없다."""

    CODE = "DB_NO_ROWS"

    def __init__(self, query_name: str) -> None:
        super().__init__(
            f"쿼리 결과 행이 없습니다({query_name}).",
            query=query_name,
        )


class RowDecodeError(DatabaseError):
    """결과 행의 형태가 기대한 레코드와 맞지 않는다."""

    CODE = "DB_ROW_DECODE_FAILED"
    HINT = "테이블 스키마와 레코드 필드 정의를 비교하세요."

    def __init__(self, field: str, reason: str, columns: Sequence[str] = ()) -> None:
        super().__init__(
            f"결과 행을 해석하지 못했습니다: 필드 '{field}' {reason}",
            cause=reason,
            field=field,
            columns=list(columns),
        )
