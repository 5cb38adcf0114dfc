"""
목적: 사용자 API 모델 공개 API를 제공한다.
설명: 응답 모델을 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/pooled_api/api/users/models/user.py
"""

from pooled_api.api.users.models.user import UserResponse

__all__ = ["UserResponse"]
