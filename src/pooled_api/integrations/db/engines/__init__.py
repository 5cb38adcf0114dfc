"""
목적: DB 엔진 구현체 공개 API를 제공한다.
설명: 드라이버별 커넥션 관리자 구현을 노출한다.
디자인 패턴: 퍼사드
참조: src/pooled_api/integrations/db/engines/postgres.py
"""

from .postgres import PostgresConnection, PostgresConnectionManager

__all__ = ["PostgresConnection", "PostgresConnectionManager"]
