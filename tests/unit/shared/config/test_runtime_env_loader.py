"""
목적: 런타임 환경별 `.env` 로딩을 검증한다.
설명: 루트 `.env` 로딩, 환경 별칭 정규화, 리소스 `.env` 누락 시 오류를 확인한다.
디자인 패턴: 전략 패턴
참조: src/pooled_api/shared/config/runtime_env_loader.py
"""

from __future__ import annotations

import os

import pytest

from pooled_api.shared.config import RuntimeEnvironmentLoader

_KEY = "POOLED_API_RUNTIME_ENV_TEST_KEY"


def _loader(tmp_path) -> RuntimeEnvironmentLoader:
    return RuntimeEnvironmentLoader(project_root=tmp_path, resources_root=tmp_path / "resources")


def test_local_env_loads_root_file_only(tmp_path, monkeypatch) -> None:
    """ENV가 비어 있으면 local로 판단하고 루트 `.env`만 로드하는지 확인한다."""

    monkeypatch.setenv("ENV", "")
    monkeypatch.delenv("APP_ENV", raising=False)
    monkeypatch.delenv(_KEY, raising=False)
    (tmp_path / ".env").write_text(f"{_KEY}=root\n", encoding="utf-8")

    try:
        assert _loader(tmp_path).load() == "local"
        assert os.environ[_KEY] == "root"
    finally:
        os.environ.pop(_KEY, None)


def test_alias_env_loads_resource_file(tmp_path, monkeypatch) -> None:
    """환경 별칭(development)이 dev로 정규화되어 리소스 `.env`를 읽는지 확인한다."""

    monkeypatch.setenv("ENV", "development")
    monkeypatch.delenv(_KEY, raising=False)
    resource_dir = tmp_path / "resources" / "dev"
    resource_dir.mkdir(parents=True)
    (resource_dir / ".env").write_text(f"{_KEY}=dev\n", encoding="utf-8")

    try:
        assert _loader(tmp_path).load() == "dev"
        assert os.environ["ENV"] == "dev"
        assert os.environ[_KEY] == "dev"
    finally:
        os.environ.pop(_KEY, None)


def test_missing_resource_file_raises(tmp_path, monkeypatch) -> None:
    """리소스 `.env`가 없으면 FileNotFoundError가 발생하는지 확인한다."""

    monkeypatch.setenv("ENV", "prod")

    with pytest.raises(FileNotFoundError):
        _loader(tmp_path).load()


def test_unsupported_env_raises(tmp_path, monkeypatch) -> None:
    """지원하지 않는 ENV 값은 ValueError로 거부하는지 확인한다."""

    monkeypatch.setenv("ENV", "qa")

    with pytest.raises(ValueError):
        _loader(tmp_path).load()
