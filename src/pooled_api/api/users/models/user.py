"""
목적: 사용자 조회 API 응답 모델을 정의한다.
설명: 도메인 User 레코드를 JSON 응답 본문 {id, name, age}로 직렬화한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/pooled_api/core/users/models.py
"""

from __future__ import annotations

from pydantic import BaseModel

from pooled_api.core.users import User


class UserResponse(BaseModel):
    """사용자 조회 응답 모델."""

    id: int
    name: str
    age: int

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        """도메인 레코드로부터 응답 모델을 만든다."""

        return cls(id=user.id, name=user.name, age=user.age)
