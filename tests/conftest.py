import sys
from collections.abc import Generator
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from addrspec.core.config import get_settings

_SETTINGS_ENV = (
    "ADDRSPEC_MINIMUM_SUB_DOMAINS",
    "ADDRSPEC_ALLOW_DOMAIN_LITERAL",
    "ADDRSPEC_ALLOW_DISPLAY_TEXT",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[None, None, None]:
    """Isolate every test from the host environment and any ``.env`` file."""

    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
