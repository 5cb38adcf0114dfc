"""
목적: 커넥션 풀 모듈 공개 API를 제공한다.
설명: 풀 구현체, 대여 토큰, 커넥션 레코드를 노출한다.
디자인 패턴: 퍼사드
참조: src/pooled_api/integrations/db/pool/pool.py, src/pooled_api/integrations/db/pool/scoped.py
"""

from .pooled import PooledConnection
from .scoped import ScopedConnection
from .pool import ConnectionPool

__all__ = ["ConnectionPool", "ScopedConnection", "PooledConnection"]
