"""
목적: API 상수 공개 API를 제공한다.
설명: 사용자/헬스체크 라우팅 경로와 태그를 한곳에 모은다.
디자인 패턴: 상수 모듈
참조: src/pooled_api/api/users/routers/router.py, src/pooled_api/api/health/routers/server.py
"""

USERS_API_TAG = "users"
USERS_FETCH_FIRST_PATH = "/"
USERS_FETCH_BY_ID_PATH = "/{user_id}"

HEALTH_API_TAG = "health"
HEALTH_PATH = "/health"

__all__ = [
    "USERS_API_TAG",
    "USERS_FETCH_FIRST_PATH",
    "USERS_FETCH_BY_ID_PATH",
    "HEALTH_API_TAG",
    "HEALTH_PATH",
]
