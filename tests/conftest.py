import sys
from pathlib import Path

import pytest

# Ensure local source package (src/qbank) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from qbank import HttpClient  # noqa: E402


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("QBANK_URL", raising=False)
    monkeypatch.delenv("QBANK_ACCESS_TOKEN", raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://test.example.com/api"


@pytest.fixture
def http_client(base_url: str) -> HttpClient:
    return HttpClient(base_url)
