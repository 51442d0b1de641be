import sys
from pathlib import Path

# Ensure package import for tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from config import TestingConfig
from main import create_app


@pytest.fixture
def app():
    """Fresh app (and fresh Workspace) per test."""

    return create_app(TestingConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def drain():
    """Exhaust a step generator and return its events."""

    def _drain(gen):
        return list(gen)

    return _drain
