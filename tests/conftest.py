"""Root pytest configuration for test discovery and auto-skip behavior.

All tests stay visible in the test explorer; slow tests are skipped unless
explicitly enabled via environment variables or pytest options.

Test Structure:
    tests/
    ├── pathviz/
    │   └── unit/              # Fast, isolated tests per layer
    │       ├── domain/
    │       ├── application/
    │       ├── infrastructure/
    │       └── presentation/
    └── shared/                # Shared fixtures and factories

Environment Variables:
    RUN_SLOW=1           Run @pytest.mark.slow tests
    RUN_ALL_TESTS=1      Run all tests (overrides other settings)

Pytest Options:
    --run-slow           Run slow tests
    --run-all            Run all tests
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from pathviz_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load a test env file when present (same lookup as local development)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.test").exists():
    load_dotenv(CONFIG_DIR / ".env.test")


def _flag(config, option: str, env_var: str) -> bool:
    return config.getoption(option) or os.environ.get(env_var, "").lower() in (
        "1",
        "true",
        "yes",
    )


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.slow",
    )
    parser.addoption(
        "--run-all",
        action="store_true",
        default=False,
        help="Run all tests regardless of markers",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "slow: Tests that take more than 1 second (auto-skipped)",
    )


def pytest_collection_modifyitems(config, items):
    """Auto-skip slow tests unless explicitly enabled."""
    if _flag(config, "--run-all", "RUN_ALL_TESTS"):
        return
    if _flag(config, "--run-slow", "RUN_SLOW"):
        return

    skip_slow = pytest.mark.skip(
        reason="Slow test - run with --run-slow or RUN_SLOW=1",
    )
    for item in items:
        if "slow" in {mark.name for mark in item.iter_markers()}:
            item.add_marker(skip_slow)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Give every test fresh settings without a configured snapshot."""
    monkeypatch.delenv("SNAPSHOT_PATH", raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()
