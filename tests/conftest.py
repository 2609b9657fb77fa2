from pathlib import Path

import pytest

from src.api.deps import get_settings
from src.rules.loader import RULES_PATH_ENV

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def rules_path() -> Path:
    """The project's real rules.yaml."""
    return PROJECT_ROOT / "rules.yaml"


@pytest.fixture(autouse=True)
def project_rules(monkeypatch: pytest.MonkeyPatch, rules_path: Path):
    """Point the shells at the project rules regardless of the working directory."""
    monkeypatch.setenv(RULES_PATH_ENV, str(rules_path))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
