"""
목적: FastAPI 앱 실행 엔트리 포인트를 제공한다.
설명: 런타임 환경 파일을 로드한 뒤 앱을 만들고, uvicorn으로 설정된 주소에서 수신한다.
디자인 패턴: 단일 책임 원칙(SRP)
참조: src/pooled_api/api/app.py, src/pooled_api/shared/config/runtime_env_loader.py
"""

import uvicorn

from pooled_api.shared.config import RuntimeEnvironmentLoader

# 런타임 환경(local/dev/stg/prod)을 판별해 환경 파일을 로드한다.
RUNTIME_ENV = RuntimeEnvironmentLoader().load()

# NOTE:
# .env 로딩 이후에 설정/앱을 import해야 최신 환경 변수를 읽을 수 있다.
from pooled_api.api.app import create_app  # noqa: E402

app = create_app()


def run() -> None:
    """설정된 host/port로 서버를 실행한다."""

    settings = app.state.settings
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
