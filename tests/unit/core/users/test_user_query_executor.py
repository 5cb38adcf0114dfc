"""
목적: 사용자 쿼리 실행기와 행 해석 규칙을 검증한다.
설명: 첫 행 매핑, 바인딩 파라미터 전달, 빈 결과/누락 필드/타입 불일치/드라이버 오류의 예외 변환을 확인한다.
디자인 패턴: 서비스 레이어, 테스트 더블
참조: src/pooled_api/core/users/executor.py, src/pooled_api/core/users/queries.py
"""

from __future__ import annotations

from typing import Any, List, Sequence

import pytest

from pooled_api.core.users import (
    FETCH_FIRST_USER_SQL,
    FETCH_USER_BY_ID_SQL,
    User,
    UserQueryExecutor,
    decode_user,
    fetch_first_user_query,
    fetch_user_by_id_query,
)
from pooled_api.shared.exceptions import NoRowsError, QueryFailedError, RowDecodeError


class _StubScoped:
    """실행기가 쓰는 fetch/connection_id만 흉내 내는 스텁."""

    connection_id = 7

    def __init__(self, rows: List[dict] | None = None, error: Exception | None = None) -> None:
        self._rows = rows or []
        self._error = error
        self.calls: list[tuple[str, tuple]] = []

    async def fetch(self, query: str, params: Sequence[Any] = ()) -> List[dict]:
        self.calls.append((query, tuple(params)))
        if self._error is not None:
            raise self._error
        return list(self._rows)


@pytest.mark.asyncio
async def test_execute_maps_first_row_to_user() -> None:
    """첫 행이 User로 매핑되고 나머지 행은 무시되는지 확인한다."""

    scoped = _StubScoped(
        rows=[
            {"id": 1, "name": "Ann", "age": 30},
            {"id": 2, "name": "Bob", "age": 41},
        ]
    )

    user = await UserQueryExecutor().execute(scoped, fetch_first_user_query())

    assert user == User(id=1, name="Ann", age=30)
    assert scoped.calls == [(FETCH_FIRST_USER_SQL, ())]


@pytest.mark.asyncio
async def test_execute_binds_identifier_as_parameter() -> None:
    """식별자가 SQL 본문이 아니라 바인딩 파라미터로 전달되는지 확인한다."""

    scoped = _StubScoped(rows=[{"id": 1, "name": "Ann", "age": 30}])
    raw_id = "1; DROP TABLE users"

    await UserQueryExecutor().execute(scoped, fetch_user_by_id_query(raw_id))

    query, params = scoped.calls[0]
    assert query == FETCH_USER_BY_ID_SQL
    assert raw_id not in query
    assert params == (raw_id,)


@pytest.mark.asyncio
async def test_execute_raises_no_rows_for_empty_result() -> None:
    """결과 행이 없으면 NoRowsError가 발생하는지 확인한다."""

    with pytest.raises(NoRowsError) as exc_info:
        await UserQueryExecutor().execute(_StubScoped(rows=[]), fetch_user_by_id_query("999"))

    assert exc_info.value.code == "DB_NO_ROWS"
    assert "fetch_user_by_id" in exc_info.value.message


@pytest.mark.asyncio
async def test_execute_wraps_driver_error() -> None:
    """드라이버 오류가 QueryFailedError로 감싸지는지 확인한다."""

    original = RuntimeError('relation "users" does not exist')

    with pytest.raises(QueryFailedError) as exc_info:
        await UserQueryExecutor().execute(_StubScoped(error=original), fetch_first_user_query())

    assert exc_info.value.original is original
    assert 'relation "users" does not exist' in exc_info.value.message


def test_decode_user_rejects_missing_field() -> None:
    """필수 필드가 없으면 RowDecodeError가 발생하는지 확인한다."""

    with pytest.raises(RowDecodeError) as exc_info:
        decode_user({"id": 1, "name": "Ann"})

    assert exc_info.value.detail.metadata["field"] == "age"
    assert exc_info.value.detail.metadata["columns"] == ["id", "name"]


@pytest.mark.parametrize(
    "row, field",
    [
        ({"id": "1", "name": "Ann", "age": 30}, "id"),
        ({"id": 1, "name": None, "age": 30}, "name"),
        ({"id": 1, "name": "Ann", "age": True}, "age"),
        ({"id": 1, "name": "Ann", "age": 30.5}, "age"),
    ],
)
def test_decode_user_rejects_type_mismatch(row: dict, field: str) -> None:
    """필드 타입이 맞지 않으면 RowDecodeError가 발생하는지 확인한다."""

    with pytest.raises(RowDecodeError) as exc_info:
        decode_user(row)

    assert exc_info.value.detail.metadata["field"] == field


def test_decode_user_ignores_extra_columns() -> None:
    """추가 컬럼은 무시하고 이름 기준으로 매핑하는지 확인한다."""

    user = decode_user({"age": 30, "email": "ann@example.com", "name": "Ann", "id": 1})

    assert user == User(id=1, name="Ann", age=30)
