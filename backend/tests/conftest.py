import asyncio
import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# app.main refuses to import without trusted CORS origins
os.environ.setdefault("ALLOWED_ORIGINS", "http://testserver")
os.environ.setdefault("ALLOW_CREDENTIALS", "false")

from app.services.games import game_registry  # noqa: E402


@pytest.fixture(autouse=True)
def reset_game_registry():
    """Start every test with an empty in-memory game store."""
    asyncio.run(game_registry.clear())
    yield
    asyncio.run(game_registry.clear())
