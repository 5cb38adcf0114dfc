"""
목적: 사용자 조회 쿼리 실행기를 제공한다.
설명: 대여한 커넥션으로 쿼리를 실행하고 첫 행을 컬럼 이름 기준으로 User 레코드에 매핑한다.
디자인 패턴: 서비스 레이어, 매퍼
참조: src/pooled_api/core/users/queries.py, src/pooled_api/integrations/db/pool/scoped.py
"""

from __future__ import annotations

from typing import Optional, Tuple, Type

from pooled_api.core.users.models import User
from pooled_api.integrations.db.base.manager import Row
from pooled_api.integrations.db.base.models import QueryDescriptor
from pooled_api.integrations.db.pool.scoped import ScopedConnection
from pooled_api.shared.exceptions import (
    BaseAppException,
    NoRowsError,
    QueryFailedError,
    RowDecodeError,
)
from pooled_api.shared.logging import Logger, create_default_logger

_USER_FIELDS: Tuple[Tuple[str, Type], ...] = (
    ("id", int),
    ("name", str),
    ("age", int),
)


class UserQueryExecutor:
    """사용자 조회 쿼리 실행기."""

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self._logger = logger or create_default_logger("UserQueryExecutor")

    async def execute(self, scoped: ScopedConnection, query: QueryDescriptor) -> User:
        """쿼리를 실행하고 첫 행을 User로 변환한다.

        Raises:
            QueryFailedError: 드라이버가 쿼리 실행에 실패한 경우.
            NoRowsError: 결과 행이 없는 경우.
            RowDecodeError: 행에 필드가 없거나 타입이 맞지 않는 경우.
        """

        try:
            rows = await scoped.fetch(query.text, query.params)
        except BaseAppException:
            raise
        except Exception as error:
            self._logger.error(f"쿼리 실행 실패: query={query.name}, error={error}")
            raise QueryFailedError(query.name, error) from error

        if not rows:
            raise NoRowsError(query.name)
        user = decode_user(rows[0])
        self._logger.debug(
            f"쿼리 완료: query={query.name}, connection_id={scoped.connection_id}, user_id={user.id}"
        )
        return user


def decode_user(row: Row) -> User:
    """행을 User로 변환한다. bool은 정수로 취급하지 않는다."""

    values = {}
    columns = list(row.keys())
    for field, expected in _USER_FIELDS:
        if field not in row:
            raise RowDecodeError(field, "컬럼이 없습니다.", columns)
        value = row[field]
        if isinstance(value, bool) or not isinstance(value, expected):
            raise RowDecodeError(
                field,
                f"타입이 맞지 않습니다(기대: {expected.__name__}, 실제: {type(value).__name__}).",
                columns,
            )
        values[field] = value
    return User(**values)
