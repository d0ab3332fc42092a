import numpy as np
import pytest

from astrolingua.actions import IDLE, INPUT_DIM, InputIndex, InputState, ShipInput


def test_from_array_threshold():
    a = np.zeros(INPUT_DIM, dtype=np.float32)
    a[InputIndex.THRUST] = 0.7
    a[InputIndex.FIRE] = 1.0
    a[InputIndex.ROTATE_LEFT] = -0.3
    inp = ShipInput.from_array(a)
    assert inp == ShipInput(thrust_forward=True, fire=True)


def test_from_array_too_short():
    with pytest.raises(ValueError):
        ShipInput.from_array([1.0, 0.0])


def test_from_keys():
    inp = ShipInput.from_keys(["KeyW", "ArrowLeft", "Space", "KeyQ"])
    assert inp == ShipInput(thrust_forward=True, rotate_left=True, fire=True)
    assert ShipInput.from_keys([]) == IDLE


def test_input_state_latch():
    latch = InputState()
    assert latch.key_down("ArrowRight") is True
    assert latch.key_down("Escape") is False
    latch.set(InputIndex.FIRE, True)
    snap = latch.snapshot()
    assert snap == ShipInput(rotate_right=True, fire=True)

    # Later writes don't leak into an earlier snapshot.
    latch.key_up("ArrowRight")
    assert snap.rotate_right is True
    assert latch.snapshot() == ShipInput(fire=True)

    latch.release_all()
    assert latch.snapshot() == IDLE
