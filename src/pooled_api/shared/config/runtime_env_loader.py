"""
목적: 런타임 환경별 `.env` 로딩을 제공한다.
설명: 프로젝트 루트 `.env`를 먼저 로드하고, `ENV` 값이 dev/stg/prod이면 해당 리소스 `.env`를 추가로 로드한다.
디자인 패턴: 전략 패턴
참조: src/pooled_api/shared/config/loader.py, src/pooled_api/api/main.py
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from pooled_api.shared.logging import Logger, create_default_logger


class RuntimeEnvironmentLoader:
    """런타임 환경별 `.env` 로더이다.

    이미 설정된 프로세스 환경 변수는 덮어쓰지 않는다.
    """

    _SUPPORTED_ENVS = {"local", "dev", "stg", "prod"}
    _ENV_ALIASES = {
        "development": "dev",
        "staging": "stg",
        "production": "prod",
    }
    _ENV_KEYS = ("ENV", "APP_ENV")

    def __init__(
        self,
        logger: Optional[Logger] = None,
        project_root: Optional[Path] = None,
        resources_root: Optional[Path] = None,
    ) -> None:
        module_path = Path(__file__).resolve()
        self._project_root = Path(project_root or module_path.parents[4])
        self._resources_root = Path(resources_root or module_path.parents[2] / "resources")
        self._logger = logger or create_default_logger("RuntimeEnvironmentLoader")

    @property
    def root_env_path(self) -> Path:
        """프로젝트 루트 `.env` 경로를 반환한다."""

        return self._project_root / ".env"

    def load(self) -> str:
        """런타임 환경을 판별하고 관련 `.env`를 로드한다.

        Returns:
            판별된 런타임 환경 문자열(`local/dev/stg/prod`).
        """

        if self.root_env_path.exists():
            load_dotenv(dotenv_path=self.root_env_path, override=False)
        else:
            self._logger.debug(f"프로젝트 루트 .env 파일이 없어 건너뜁니다: {self.root_env_path}")

        runtime_env = self._resolve_runtime_env()
        os.environ["ENV"] = runtime_env
        if runtime_env == "local":
            return runtime_env

        env_file = self._resources_root / runtime_env / ".env"
        if not env_file.exists():
            raise FileNotFoundError(f"환경 파일을 찾을 수 없습니다: {env_file}")
        load_dotenv(dotenv_path=env_file, override=False)
        self._logger.info(f"런타임 환경 로드 완료: env={runtime_env}, resource={env_file}")
        return runtime_env

    def _resolve_runtime_env(self) -> str:
        raw_value = next(
            (os.environ[key] for key in self._ENV_KEYS if os.getenv(key, "").strip()),
            "",
        )
        normalized = raw_value.strip().lower()
        if not normalized:
            return "local"
        normalized = self._ENV_ALIASES.get(normalized, normalized)
        if normalized not in self._SUPPORTED_ENVS:
            supported = ", ".join(sorted(self._SUPPORTED_ENVS))
            raise ValueError(f"지원하지 않는 ENV 값입니다: {raw_value}. 허용값: {supported}")
        return normalized
