import os
import random

# Run pygame without a display or sound card
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from flappy_piggies.data_models import GameConfig, GameState, Viewport
from flappy_piggies.input import InputEvent, Intent
from flappy_piggies.simulation import Simulation


@pytest.fixture
def viewport():
    return Viewport(960, 640)


@pytest.fixture
def sim(viewport):
    return Simulation(viewport=viewport, rng=random.Random(1234))


@pytest.fixture
def safe_config():
    """No gravity and a gap covering nearly the whole playfield, so runs never end."""
    return GameConfig(gravity=0.0, pillar_gap=600, pillar_max_gap_ratio=1.0, pillar_margin=0)


@pytest.fixture
def playing(sim):
    sim.apply(InputEvent(Intent.START))
    sim.drain_cues()
    assert sim.state == GameState.PLAYING
    return sim
