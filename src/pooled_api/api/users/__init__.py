"""
목적: 사용자 API 패키지를 제공한다.
설명: 사용자 조회 라우터와 응답 모델을 묶는다.
디자인 패턴: 패키지
참조: src/pooled_api/api/users/routers
"""
