"""
목적: DB 베이스 모듈 공개 API를 제공한다.
설명: 공통 모델과 커넥션 관리자/풀 인터페이스를 노출한다.
디자인 패턴: 퍼사드
참조: src/pooled_api/integrations/db/base/models.py, src/pooled_api/integrations/db/base/manager.py
"""

from .manager import BaseConnectionManager, DatabaseConnection, Row
from .models import PoolConfig, PoolState, QueryDescriptor
from .pool import BaseConnectionPool

__all__ = [
    "PoolConfig",
    "PoolState",
    "QueryDescriptor",
    "Row",
    "DatabaseConnection",
    "BaseConnectionManager",
    "BaseConnectionPool",
]
