import sys
from pathlib import Path

import pytest

# Ensure local source package (src/convenient_restkit) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    for variable in (
        "RESTKIT_TIMEOUT",
        "RESTKIT_FOLLOW_REDIRECTS",
        "RESTKIT_VERIFY",
        "RESTKIT_DEBUG",
        "RESTKIT_USER_AGENT",
        "SSL_CERT_FILE",
        "REQUESTS_CA_BUNDLE",
        "SSL_CERT_DIR",
    ):
        monkeypatch.delenv(variable, raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://example.test"
