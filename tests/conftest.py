"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from chronicler.api.app import create_app
from chronicler.config import Settings

_REPO_ROOT = Path(__file__).parent.parent

SAMPLE_CONTENT = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_content() -> str:
    """Six rows whose sorted columns give a total distance of 11."""
    return SAMPLE_CONTENT


@pytest.fixture
def sample_file(tmp_path: Path, sample_content: str) -> Path:
    path = tmp_path / "input.txt"
    path.write_text(sample_content, encoding="utf-8")
    return path


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def client(settings: Settings) -> TestClient:
    return TestClient(create_app(settings))
