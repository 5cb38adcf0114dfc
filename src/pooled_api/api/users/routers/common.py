"""
목적: 사용자 라우터 공통 유틸을 제공한다.
설명: 도메인 예외를 에러 매퍼로 변환해 평문 진단 메시지 응답을 만든다.
디자인 패턴: 유틸리티 모듈
참조: src/pooled_api/shared/exceptions/mapper.py
"""

from __future__ import annotations

from fastapi import Request
from fastapi.responses import PlainTextResponse

from pooled_api.shared.exceptions import BaseAppException, map_error


def to_error_response(error: BaseException) -> PlainTextResponse:
    """예외를 평문 에러 응답으로 변환한다."""

    mapped = map_error(error)
    return PlainTextResponse(content=mapped.message, status_code=mapped.status_code)


async def handle_app_exception(request: Request, error: BaseAppException) -> PlainTextResponse:
    """핸들러 밖(의존성 단계)에서 올라온 도메인 예외를 응답으로 바꾼다."""

    return to_error_response(error)
