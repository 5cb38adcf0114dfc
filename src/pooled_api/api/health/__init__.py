"""
목적: 헬스체크 API 패키지를 제공한다.
설명: 서버/풀 상태 확인 라우터를 묶는다.
디자인 패턴: 패키지
참조: src/pooled_api/api/health/routers/server.py
"""
