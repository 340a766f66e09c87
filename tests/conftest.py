import random
import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from models.strip_config import StripConfig
from services.preview_session_service import PreviewSessionService


@pytest.fixture
def rng():
    """Seeded random source so fire/sparkle frames are reproducible."""
    return random.Random(1234)


@pytest.fixture
def strip_config():
    return StripConfig(led_count=10, brightness=100, speed=50)


@pytest.fixture
def session(strip_config, rng):
    """Idle preview session with 10 LEDs and a seeded random source."""
    return PreviewSessionService(config=strip_config, rng=rng)
