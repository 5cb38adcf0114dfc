"""
목적: 첫 사용자 조회 라우터를 제공한다.
설명: 요청 커넥션으로 파라미터 없는 고정 쿼리를 실행해 사용자 한 명을 반환한다.
디자인 패턴: 라우터 패턴
참조: src/pooled_api/core/users/executor.py, src/pooled_api/api/dependencies/connection.py
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from pooled_api.api.const import USERS_FETCH_FIRST_PATH
from pooled_api.api.dependencies import get_scoped_connection, get_user_query_executor
from pooled_api.api.users.models import UserResponse
from pooled_api.api.users.routers.common import to_error_response
from pooled_api.core.users import UserQueryExecutor, fetch_first_user_query
from pooled_api.integrations.db.pool.scoped import ScopedConnection
from pooled_api.shared.exceptions import BaseAppException

router = APIRouter()


@router.post(
    USERS_FETCH_FIRST_PATH,
    response_model=UserResponse,
    summary="첫 번째 사용자를 조회합니다.",
)
async def fetch_first_user(
    scoped: ScopedConnection = Depends(get_scoped_connection),
    executor: UserQueryExecutor = Depends(get_user_query_executor),
) -> UserResponse | Response:
    """고정 쿼리로 사용자 한 명을 조회한다."""

    try:
        user = await executor.execute(scoped, fetch_first_user_query())
    except BaseAppException as error:
        return to_error_response(error)
    return UserResponse.from_user(user)
