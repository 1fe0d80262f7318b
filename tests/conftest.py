import os
import random

import pytest

# pygame must never try to open a real window or audio device in tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from rnake.game import GameContext  # noqa: E402


@pytest.fixture
def ctx() -> GameContext:
    return GameContext(random.Random(1234))
