"""
목적: 공통 상수를 제공한다.
설명: 설정 로더와 로거가 공유하는 기본값을 한곳에 모은다.
디자인 패턴: 상수 모듈
참조: src/pooled_api/shared/config/loader.py, src/pooled_api/shared/logging/logger.py
"""

from __future__ import annotations


class SharedConst:
    """공통 상수 모음."""

    DEFAULT_ENCODING = "utf-8"
    ENV_PREFIX = "POOLED_API__"
    ENV_NESTED_DELIMITER = "__"
    LOG_STDOUT_ENV = "LOG_STDOUT"
    LOG_MAX_RECORDS = 10_000


__all__ = ["SharedConst"]
