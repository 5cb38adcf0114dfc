"""
목적: 사용자 도메인 공개 API를 제공한다.
설명: User 레코드, 쿼리 기술자 팩토리, 쿼리 실행기를 노출한다.
디자인 패턴: 퍼사드
참조: src/pooled_api/core/users/executor.py
"""

from pooled_api.core.users.executor import UserQueryExecutor, decode_user
from pooled_api.core.users.models import User
from pooled_api.core.users.queries import (
    FETCH_FIRST_USER_SQL,
    FETCH_USER_BY_ID_SQL,
    fetch_first_user_query,
    fetch_user_by_id_query,
)

__all__ = [
    "User",
    "UserQueryExecutor",
    "decode_user",
    "FETCH_FIRST_USER_SQL",
    "FETCH_USER_BY_ID_SQL",
    "fetch_first_user_query",
    "fetch_user_by_id_query",
]
