"""
목적: 에러 매퍼의 상태 코드/메시지 변환을 검증한다.
설명: 모든 DB 실패가 서버 오류 상태와 진단 메시지로 바뀌는지 확인한다.
디자인 패턴: 매퍼
참조: src/pooled_api/shared/exceptions/mapper.py
"""

from __future__ import annotations

import pytest

from pooled_api.shared.exceptions import (
    ConnectionFailedError,
    ConnectionReleaseError,
    NoRowsError,
    PoolClosedError,
    PoolExhaustedError,
    QueryFailedError,
    RowDecodeError,
    map_error,
)


@pytest.mark.parametrize(
    "error",
    [
        PoolExhaustedError(timeout=1.0, max_size=2),
        PoolClosedError(),
        ConnectionFailedError(OSError("refused")),
        ConnectionReleaseError("이미 반환된 커넥션입니다.", 1),
        QueryFailedError("fetch_first_user", RuntimeError("syntax error")),
        NoRowsError("fetch_user_by_id"),
        RowDecodeError("age", "컬럼이 없습니다."),
    ],
)
def test_map_error_uses_server_error_and_message(error) -> None:
    """도메인 예외가 500과 예외 메시지로 변환되는지 확인한다."""

    mapped = map_error(error)

    assert mapped.status_code == 500
    assert mapped.message == error.message
    assert mapped.code == error.code


def test_map_error_handles_unknown_exception() -> None:
    """도메인 밖의 예외도 500과 문자열 메시지로 변환되는지 확인한다."""

    mapped = map_error(KeyError("boom"))

    assert mapped.status_code == 500
    assert mapped.code == "INTERNAL_ERROR"
    assert "boom" in mapped.message
