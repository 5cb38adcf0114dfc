"""
목적: 실제 서버 프로세스에 대해 사용자 API를 검증한다.
설명: 헬스체크, 없는 식별자 조회의 평문 에러, 동시 요청 후 커넥션 누수 여부를 확인한다.
디자인 패턴: E2E 테스트
참조: tests/e2e/conftest.py, src/pooled_api/api/main.py
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import httpx
import pytest


@pytest.mark.e2e
def test_health_reports_open_pool(users_api_client: httpx.Client) -> None:
    """서버가 풀을 연 상태로 기동되었는지 확인한다."""

    response = users_api_client.get("/health")

    assert response.status_code == 200
    assert response.json()["pool"]["max_size"] == 2


@pytest.mark.e2e
def test_unknown_id_returns_server_error(users_api_client: httpx.Client) -> None:
    """존재하지 않는 식별자 조회가 500 평문 응답으로 끝나는지 확인한다."""

    response = users_api_client.get("/-1")

    assert response.status_code == 500
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text


@pytest.mark.e2e
def test_concurrent_requests_do_not_leak_connections(users_api_client: httpx.Client) -> None:
    """풀 크기보다 많은 동시 요청 뒤에도 대여 중 커넥션이 남지 않는지 확인한다."""

    def call(_: int) -> int:
        return users_api_client.get("/-1").status_code

    with ThreadPoolExecutor(max_workers=6) as executor:
        statuses = list(executor.map(call, range(12)))

    assert all(status == 500 for status in statuses)
    pool = users_api_client.get("/health").json()["pool"]
    assert pool["in_use"] == 0
    assert pool["connections"] <= 2
