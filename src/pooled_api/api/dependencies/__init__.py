"""
목적: API 의존성 공개 API를 제공한다.
설명: 요청 단위 커넥션 주입과 앱 자원 조회 의존성을 노출한다.
디자인 패턴: 퍼사드
참조: src/pooled_api/api/dependencies/connection.py
"""

from pooled_api.api.dependencies.connection import (
    get_connection_pool,
    get_scoped_connection,
    get_user_query_executor,
)

__all__ = [
    "get_connection_pool",
    "get_scoped_connection",
    "get_user_query_executor",
]
