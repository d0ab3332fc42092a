import math

import numpy as np

from astrolingua import GameConfig, Session, SessionStatus
from astrolingua.actions import IDLE
from astrolingua.agents.autopilot import Autopilot


def _pilot(config):
    return Autopilot(config.width, config.height)


def test_idle_without_correct_target(make_state, config):
    state = make_state()
    assert _pilot(config).act(state) == IDLE


def test_fires_when_aligned(make_state, make_target, config):
    state = make_state()
    # Ship faces up; target straight above.
    state.targets = [make_target([480.0, 150.0], correct=True)]
    inp = _pilot(config).act(state)
    assert inp.fire is True
    assert not inp.rotate_left and not inp.rotate_right
    assert inp.thrust_forward is False


def test_turns_toward_target(make_state, make_target, config):
    state = make_state()
    state.targets = [make_target([700.0, 300.0], correct=True)]
    inp = _pilot(config).act(state)
    assert inp.rotate_right is True
    assert inp.fire is False


def test_turns_across_seam(make_state, make_target, config):
    state = make_state()
    state.ship.pos[:] = [10.0, 300.0]
    state.targets = [make_target([950.0, 300.0], correct=True)]
    inp = _pilot(config).act(state)
    assert inp.rotate_left is True


def test_thrusts_when_far_and_ahead(make_state, make_target, config):
    state = make_state()
    state.ship.angle = 0.0
    state.targets = [make_target([900.0, 300.0], correct=True)]
    inp = _pilot(config).act(state)
    assert inp.thrust_forward is True
    assert inp.fire is True


def test_ignores_decoys(make_state, make_target, config):
    state = make_state()
    state.targets = [make_target([480.0, 100.0], correct=False)]
    assert _pilot(config).act(state) == IDLE


def test_clears_a_wave():
    cfg = GameConfig(seed=0)
    session = Session(cfg)
    session.start()
    state = session.state
    correct = state.correct_target
    correct.pos[:] = [680.0, 300.0]
    correct.vel[:] = 0.0
    correct.size = 30.0
    state.targets = [correct]

    pilot = _pilot(cfg)
    for _ in range(200):
        session.step(pilot.act(session.state), 1.0)
        if session.state.level > 1:
            break
    assert session.state.level == 2
    assert session.status == SessionStatus.RUNNING
    assert session.state.hits == 1
    assert math.isfinite(float(np.sum(session.state.ship.pos)))
