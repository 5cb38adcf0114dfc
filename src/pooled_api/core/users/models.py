"""
목적: 사용자 도메인 레코드를 정의한다.
설명: users 테이블 한 행을 투영한 일시적 레코드다. 저장 책임은 없다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/pooled_api/core/users/executor.py
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class User(BaseModel):
    """사용자 레코드 모델이다.

    Args:
        id: 사용자 식별자.
        name: 사용자 이름.
        age: 나이.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    age: int
