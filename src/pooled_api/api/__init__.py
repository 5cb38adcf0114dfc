"""
목적: HTTP API 패키지를 제공한다.
설명: FastAPI 앱 팩토리, 라우터, 의존성을 묶는다.
디자인 패턴: 패키지
참조: src/pooled_api/api/app.py
"""
