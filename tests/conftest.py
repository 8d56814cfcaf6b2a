"""Pytest configuration and fixtures for pyflap tests."""

import pytest

from fakes import FakeRenderer, FakeRoot, MemoryHighScoreStore, RecordingDisplay, ScriptedRandom
from pyflap.app.session_controller import GameSession
from pyflap.domain.config import GameConfig
from pyflap.domain.game_state import create_context
from pyflap.domain.world import World


@pytest.fixture
def renderer():
    """A 400x600 playfield with a 20px actor at x=80 and a 60px wide obstacle."""
    return FakeRenderer()


@pytest.fixture
def rng():
    return ScriptedRandom(0.5)


@pytest.fixture
def world(renderer, rng):
    return World(renderer, rng)


@pytest.fixture
def context(renderer):
    return create_context(GameConfig(), renderer)


@pytest.fixture
def root():
    return FakeRoot()


@pytest.fixture
def display():
    return RecordingDisplay()


@pytest.fixture
def make_session(root, world, context, display):
    """Build a GameSession on the fake event loop; the store is the only knob."""

    def _make(store=None, *, restart_delay_ms=250):
        return GameSession(
            root=root,
            world=world,
            context=context,
            store=store if store is not None else MemoryHighScoreStore(),
            display=display,
            fps=60,
            restart_delay_ms=restart_delay_ms,
            clock=root.clock,
        )

    return _make
