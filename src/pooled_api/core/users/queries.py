"""
목적: 사용자 조회 쿼리 기술자를 제공한다.
설명: 고정 쿼리와 경로 세그먼트로 받은 식별자를 바인딩하는 쿼리를 만든다.
디자인 패턴: 팩토리 함수
참조: src/pooled_api/integrations/db/base/models.py, src/pooled_api/core/users/executor.py
"""

from __future__ import annotations

from pooled_api.integrations.db.base.models import QueryDescriptor

FETCH_FIRST_USER_SQL = "SELECT * FROM users LIMIT 1"
FETCH_USER_BY_ID_SQL = "SELECT * FROM users WHERE id = %s LIMIT 1"


def fetch_first_user_query() -> QueryDescriptor:
    """파라미터가 없는 첫 사용자 조회 쿼리를 반환한다."""

    return QueryDescriptor(name="fetch_first_user", text=FETCH_FIRST_USER_SQL)


def fetch_user_by_id_query(raw_id: str) -> QueryDescriptor:
    """식별자 기반 사용자 조회 쿼리를 반환한다.

    raw_id는 SQL 본문에 섞지 않고 바인딩 파라미터로만 전달한다.
    """

    return QueryDescriptor(
        name="fetch_user_by_id",
        text=FETCH_USER_BY_ID_SQL,
        params=(raw_id,),
    )
