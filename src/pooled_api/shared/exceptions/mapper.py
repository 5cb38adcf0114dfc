"""
목적: 내부 예외를 HTTP 응답용 (상태 코드, 메시지) 쌍으로 변환한다.
설명: 풀 획득/쿼리/행 해석 실패는 모두 하나의 서버 오류 범주로 노출한다.
디자인 패턴: 매퍼
참조: src/pooled_api/shared/exceptions/errors.py, src/pooled_api/api/users/routers/common.py
"""

from __future__ import annotations

from typing import Dict

from pydantic import BaseModel

from pooled_api.shared.exceptions.base import BaseAppException

INTERNAL_SERVER_ERROR = 500

# 코드별 상태 코드. 현재는 모든 실패가 500으로 통일되어 있다.
_STATUS_BY_CODE: Dict[str, int] = {
    "DB_POOL_EXHAUSTED": INTERNAL_SERVER_ERROR,
    "DB_POOL_CLOSED": INTERNAL_SERVER_ERROR,
    "DB_CONNECTION_FAILED": INTERNAL_SERVER_ERROR,
    "DB_CONNECTION_RELEASE_INVALID": INTERNAL_SERVER_ERROR,
    "DB_QUERY_FAILED": INTERNAL_SERVER_ERROR,
    "DB_NO_ROWS": INTERNAL_SERVER_ERROR,
    "DB_ROW_DECODE_FAILED": INTERNAL_SERVER_ERROR,
}


class ErrorResponse(BaseModel):
    """에러 응답 모델이다.

    Args:
        status_code: HTTP 상태 코드.
        message: 응답 본문에 그대로 쓰이는 진단 메시지.
        code: 내부 에러 코드.
    """

    status_code: int
    message: str
    code: str = "INTERNAL_ERROR"


def map_error(error: BaseException) -> ErrorResponse:
    """예외를 에러 응답 모델로 변환한다."""

    if isinstance(error, BaseAppException):
        return ErrorResponse(
            status_code=_STATUS_BY_CODE.get(error.code, INTERNAL_SERVER_ERROR),
            message=error.message,
            code=error.code,
        )
    return ErrorResponse(status_code=INTERNAL_SERVER_ERROR, message=str(error))
