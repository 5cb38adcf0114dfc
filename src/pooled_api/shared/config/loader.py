"""
목적: 애플리케이션 설정 로더를 제공한다.
설명: dict/JSON 파일/접두사 환경 변수/별칭 환경 변수를 순서대로 병합해 설정 사전을 만든다.
디자인 패턴: 빌더 패턴
참조: src/pooled_api/shared/const/__init__.py, src/pooled_api/api/settings.py
"""

from __future__ import annotations

import json
import os
from typing import Any, Dict, Mapping, Optional

from pooled_api.shared.const import SharedConst
from pooled_api.shared.logging import Logger, create_default_logger


class ConfigLoader:
    """설정 로더 구현체이다.

    나중에 추가한 소스가 앞선 소스를 덮어쓴다. 중첩 사전은 키 단위로 병합한다.

    Args:
        logger: 주입 가능한 로거.
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self._logger = logger or create_default_logger("ConfigLoader")
        self._sources: list[Dict[str, Any]] = []

    def add_dict(self, data: Optional[Mapping[str, Any]]) -> "ConfigLoader":
        """딕셔너리 설정을 추가한다."""

        if data:
            self._sources.append(dict(data))
        return self

    def add_json_file(self, path: Optional[str], required: bool = False) -> "ConfigLoader":
        """JSON 파일 설정을 추가한다."""

        if not path:
            if required:
                raise ValueError("path는 비어 있을 수 없습니다.")
            return self
        if not os.path.exists(path):
            if required:
                raise FileNotFoundError(path)
            self._logger.warning(f"설정 파일이 없어 건너뜁니다: {path}")
            return self
        with open(path, "r", encoding=SharedConst.DEFAULT_ENCODING) as handle:
            try:
                payload = json.load(handle)
            except json.JSONDecodeError as exc:
                raise ValueError("JSON 설정 파일 파싱에 실패했습니다.") from exc
        if not isinstance(payload, dict):
            raise ValueError("JSON 설정 파일은 최상위가 객체여야 합니다.")
        self._sources.append(payload)
        return self

    def add_env(
        self,
        prefix: str = SharedConst.ENV_PREFIX,
        delimiter: str = SharedConst.ENV_NESTED_DELIMITER,
    ) -> "ConfigLoader":
        """접두사가 붙은 환경 변수를 중첩 키로 풀어 추가한다.

        예: ``POOLED_API__POOL__MAX_SIZE=4`` -> ``{"pool": {"max_size": 4}}``
        """

        env_data: Dict[str, Any] = {}
        for key, value in os.environ.items():
            if not key.startswith(prefix):
                continue
            parts = [part.lower() for part in key[len(prefix) :].split(delimiter) if part]
            if parts:
                self._assign_nested(env_data, parts, self._parse_value(value))
        if env_data:
            self._sources.append(env_data)
        return self

    def add_env_aliases(self, aliases: Mapping[str, str]) -> "ConfigLoader":
        """관례적인 환경 변수 이름을 설정 키 경로에 연결한다.

        Args:
            aliases: ``{"POSTGRES_DSN": "database_url"}`` 형태의 매핑. 값은 점으로 구분한 경로다.
        """

        env_data: Dict[str, Any] = {}
        for env_key, path in aliases.items():
            raw = os.getenv(env_key)
            if raw is None or not raw.strip():
                continue
            self._assign_nested(env_data, path.split("."), self._parse_value(raw.strip()))
        if env_data:
            self._sources.append(env_data)
        return self

    def build(self, overrides: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """수집된 설정을 병합해 반환한다."""

        merged: Dict[str, Any] = {}
        for source in self._sources:
            merged = self._merge(merged, source)
        if overrides:
            merged = self._merge(merged, dict(overrides))
        return merged

    def _assign_nested(self, root: Dict[str, Any], keys: list[str], value: Any) -> None:
        current = root
        for part in keys[:-1]:
            if not isinstance(current.get(part), dict):
                current[part] = {}
            current = current[part]
        current[keys[-1]] = value

    def _merge(self, base: Dict[str, Any], incoming: Dict[str, Any]) -> Dict[str, Any]:
        merged = dict(base)
        for key, value in incoming.items():
            if isinstance(merged.get(key), dict) and isinstance(value, dict):
                merged[key] = self._merge(merged[key], value)
            else:
                merged[key] = value
        return merged

    def _parse_value(self, raw: str) -> Any:
        lowered = raw.lower()
        if lowered in {"true", "false"}:
            return lowered == "true"
        if lowered in {"null", "none"}:
            return None
        try:
            if "." in raw:
                return float(raw)
            return int(raw)
        except ValueError:
            return raw
