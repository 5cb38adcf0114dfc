"""
목적: 사용자 API 라우터 집계를 제공한다.
설명: 엔드포인트별 분리 라우터를 하나의 사용자 라우터로 묶는다.
디자인 패턴: 컴포지트 패턴
참조: src/pooled_api/api/users/routers/*.py
"""

from __future__ import annotations

from fastapi import APIRouter

from pooled_api.api.const import USERS_API_TAG
from pooled_api.api.users.routers.fetch_first_user import router as fetch_first_user_router
from pooled_api.api.users.routers.fetch_user_by_id import router as fetch_user_by_id_router

router = APIRouter(tags=[USERS_API_TAG])
router.include_router(fetch_first_user_router)
router.include_router(fetch_user_by_id_router)
