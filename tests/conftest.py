import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from learn_python.api.config import Config
from learn_python.api.server import create_app


@pytest.fixture
def app():
    """A fresh application with its own metrics registry."""
    return create_app(
        Config(host="0.0.0.0", port=8080, app_version="1.2.3", environment="test")
    )


@pytest.fixture
def client(app):
    return TestClient(app)
