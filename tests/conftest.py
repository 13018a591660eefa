import sys
from pathlib import Path
from typing import Generator

import pytest

from hatstall import Config, RequestClient

# Ensure local source package (src/hatstall) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("HATSTALL_URL", raising=False)
    monkeypatch.delenv("HATSTALL_TIMEOUT", raising=False)
    monkeypatch.delenv("HATSTALL_APP_NAME", raising=False)
    monkeypatch.delenv("HATSTALL_DEBUG", raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://api.example.com"


@pytest.fixture
def config(base_url: str) -> Config:
    return Config(base_url=base_url, timeout=5.0)


@pytest.fixture
def client(config: Config) -> Generator[RequestClient, None, None]:
    with RequestClient(config) as client:
        yield client
