"""
목적: 풀이 관리하는 커넥션 레코드를 정의한다.
설명: 드라이버 커넥션에 풀 내부 식별자와 생성/사용 시각을 붙여 수명 정책 판정에 사용한다.
디자인 패턴: 값 객체
참조: src/pooled_api/integrations/db/pool/pool.py
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class PooledConnection:
    """풀이 소유한 커넥션 한 개."""

    connection_id: int
    raw: Any
    created_at: float = field(default_factory=time.monotonic)
    last_used_at: float = field(default_factory=time.monotonic)

    def is_expired(self, now: float, max_lifetime: Optional[float]) -> bool:
        """최대 수명을 넘겼는지 여부."""

        return max_lifetime is not None and now - self.created_at >= max_lifetime

    def is_stale(self, now: float, idle_timeout: Optional[float]) -> bool:
        """유휴 상태로 너무 오래 머물렀는지 여부."""

        return idle_timeout is not None and now - self.last_used_at >= idle_timeout
