"""
Shared fixtures for the test suite.
"""
import sys
from pathlib import Path

import pytest

# Ensure project root is importable
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class ScriptedRandom:
    """Random source that replays fixed floats and choice indices."""

    def __init__(self, floats=(), picks=()):
        self.floats = list(floats)
        self.picks = list(picks)

    def random(self):
        return self.floats.pop(0)

    def choice(self, seq):
        return seq[self.picks.pop(0)]


@pytest.fixture
def scripted():
    """Factory for ScriptedRandom: ``scripted(floats=[...], picks=[...])``."""
    return ScriptedRandom


@pytest.fixture
def fresh_pokedex():
    """Drop the cached catalog before and after the test."""
    from wildmon.species_data import reset_pokedex
    reset_pokedex()
    yield
    reset_pokedex()
