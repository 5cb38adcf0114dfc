"""
목적: 식별자 기반 사용자 조회 라우터를 제공한다.
설명: 경로 세그먼트의 식별자를 바인딩 파라미터로 넘겨 사용자 한 명을 조회한다.
디자인 패턴: 라우터 패턴
참조: src/pooled_api/core/users/queries.py, src/pooled_api/api/dependencies/connection.py
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from pooled_api.api.const import USERS_FETCH_BY_ID_PATH
from pooled_api.api.dependencies import get_scoped_connection, get_user_query_executor
from pooled_api.api.users.models import UserResponse
from pooled_api.api.users.routers.common import to_error_response
from pooled_api.core.users import UserQueryExecutor, fetch_user_by_id_query
from pooled_api.integrations.db.pool.scoped import ScopedConnection
from pooled_api.shared.exceptions import BaseAppException

router = APIRouter()


@router.get(
    USERS_FETCH_BY_ID_PATH,
    response_model=UserResponse,
    summary="식별자로 사용자를 조회합니다.",
)
async def fetch_user_by_id(
    user_id: str,
    scoped: ScopedConnection = Depends(get_scoped_connection),
    executor: UserQueryExecutor = Depends(get_user_query_executor),
) -> UserResponse | Response:
    """경로의 식별자로 사용자 한 명을 조회한다."""

    try:
        user = await executor.execute(scoped, fetch_user_by_id_query(user_id))
    except BaseAppException as error:
        return to_error_response(error)
    return UserResponse.from_user(user)
