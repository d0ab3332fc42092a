import numpy as np
import pytest

from astrolingua.config import GameConfig
from astrolingua.sim.sim import Sim
from astrolingua.sim.state import SessionStatus, SimulationState
from astrolingua.sim.target import Target
from astrolingua.vocab import VocabPair


@pytest.fixture
def config():
    return GameConfig(seed=0)


@pytest.fixture
def vocab():
    return (
        VocabPair("cat", "猫"),
        VocabPair("dog", "狗"),
        VocabPair("water", "水"),
    )


@pytest.fixture
def make_sim(config):
    def _make(seed: int = 0) -> Sim:
        return Sim(config, np.random.default_rng(seed))

    return _make


@pytest.fixture
def make_state(config):
    def _make(status: SessionStatus = SessionStatus.RUNNING, invuln: float | None = None) -> SimulationState:
        state = SimulationState.fresh(config)
        state.status = status
        if invuln is not None:
            state.ship.invuln = invuln
        return state

    return _make


@pytest.fixture
def make_target():
    def _make(pos: list, size: float = 18.0, text: str = "猫", correct: bool = False, vel: list | None = None) -> Target:
        return Target(
            pos=np.array(pos, dtype=np.float64),
            vel=np.array(vel if vel is not None else [0.0, 0.0], dtype=np.float64),
            angle=0.0,
            spin=0.0,
            size=size,
            text=text,
            is_correct=correct,
        )

    return _make
