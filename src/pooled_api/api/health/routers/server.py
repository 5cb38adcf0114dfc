"""
목적: 헬스체크 라우터 제공
설명: 서버 상태와 커넥션 풀 상태 스냅샷을 반환한다
디자인 패턴: 라우터 패턴
참조: src/pooled_api/api/app.py
"""
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from pooled_api.api.const import HEALTH_API_TAG, HEALTH_PATH

router = APIRouter(tags=[HEALTH_API_TAG])


@router.get(HEALTH_PATH, summary="서버와 커넥션 풀 상태를 조회합니다.")
async def health_check(request: Request):
    """서버와 커넥션 풀 상태를 확인합니다."""
    pool = getattr(request.app.state, "pool", None)
    if pool is None or pool.closed:
        return JSONResponse(
            content={"status": "unavailable", "pool": None},
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        )
    return JSONResponse(
        content={"status": "ok", "pool": pool.state().model_dump()},
        status_code=status.HTTP_200_OK,
    )
