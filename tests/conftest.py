"""
Shared test fixtures — test client, sample inputs, Gemini key toggles.
"""

import os
import pytest
from unittest.mock import patch
from fastapi.testclient import TestClient

# No real Gemini calls from tests — the key is switched on per test with gemini_key
os.environ["GEMINI_API_KEY"] = ""

from obragris.config import settings
from obragris.main import app


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def sample_inputs():
    """Default form values of the calculator: 60 m² house, 40 m of walls, 2.6 m high."""
    return {
        "plate_area": 60,
        "wall_height": 2.6,
        "wall_perimeter": 40,
        "window_area": 8,
        "door_count": 2,
    }


@pytest.fixture
def gemini_key():
    """Pretend a Gemini key is configured."""
    with patch.object(settings, "GEMINI_API_KEY", "test-key"):
        yield "test-key"


@pytest.fixture
def no_gemini_key():
    with patch.object(settings, "GEMINI_API_KEY", ""):
        yield
