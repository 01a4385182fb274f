import os
import tempfile

# Keep test runs from writing logs into the working directory
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "numberle-test-logs"))

import pytest

from numberle.config.game_settings import FALLBACK_EQUATION
from numberle.services.game_session import GameSession


@pytest.fixture
def session():
    game = GameSession(equations=[], random_target=False)
    game.start_new_game()
    assert game.get_target() == FALLBACK_EQUATION
    return game
