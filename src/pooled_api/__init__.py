"""
목적: pooled_api 패키지 루트.
설명: 커넥션 풀 기반 사용자 조회 HTTP 서비스이다.
디자인 패턴: 없음
참조: src/pooled_api/api/main.py
"""

__version__ = "0.1.0"
