"""
목적: 사용자 라우터 공개 API를 제공한다.
설명: 집계 라우터와 예외 응답 헬퍼를 노출한다.
디자인 패턴: 퍼사드
참조: src/pooled_api/api/users/routers/router.py
"""

from pooled_api.api.users.routers.common import handle_app_exception, to_error_response
from pooled_api.api.users.routers.router import router

__all__ = ["router", "to_error_response", "handle_app_exception"]
