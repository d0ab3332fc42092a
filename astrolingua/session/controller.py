from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import numpy as np

from ..actions import InputState
from ..config import GameConfig
from ..sim.sim import Sim
from ..sim.state import SessionStatus, SimulationState
from ..vocab import DEFAULT_VOCAB, validate_vocabulary
from .snapshot import take_snapshot

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..actions import ShipInput
    from ..sim.state import RunSummary
    from ..vocab import VocabPair
    from .snapshot import Snapshot

logger = logging.getLogger(__name__)


class Session:
    """
    Run lifecycle around one SimulationState:

      session.start()
      events = session.step(inp, dt)   # once per frame
      session.pause() / session.resume()
      session.reset()

    Idle -> Running <-> Paused; Running -> Ended happens inside ``step``
    when the last life is lost. ``start`` is accepted from Idle or Ended;
    ``reset`` from anywhere.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        vocabulary: Iterable[Any] | None = None,
        rng: np.random.Generator | None = None,
    ):
        self.config = config or GameConfig()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.vocabulary: tuple[VocabPair, ...] = validate_vocabulary(
            DEFAULT_VOCAB if vocabulary is None else vocabulary
        )
        self.sim = Sim(self.config, self.rng)
        self.input = InputState()
        self.state = SimulationState.fresh(self.config)
        self._last_input: ShipInput | None = None

    @property
    def status(self) -> SessionStatus:
        return self.state.status

    @property
    def summary(self) -> RunSummary | None:
        return self.state.summary

    def set_vocabulary(self, pairs: Iterable[Any]) -> None:
        """Replace the vocabulary; the current wave keeps its prompt, the next one draws from ``pairs``."""
        self.vocabulary = validate_vocabulary(pairs)
        logger.info(f"Vocabulary replaced ({len(self.vocabulary)} pairs)")

    def start(self) -> bool:
        if self.state.status not in (SessionStatus.IDLE, SessionStatus.ENDED):
            logger.warning(f"start() ignored while {self.state.status.value}")
            return False
        state = SimulationState.fresh(self.config)
        # Raises before anything is committed, leaving the prior state intact.
        wave = self.sim.new_wave(state, self.vocabulary)
        self.sim.apply_wave(state, wave)
        state.status = SessionStatus.RUNNING
        self.state = state
        self.input.release_all()
        logger.info(f"Run started: prompt={wave.prompt.en!r} targets={len(wave.targets)}")
        return True

    def pause(self) -> bool:
        if self.state.status != SessionStatus.RUNNING:
            return False
        self.state.status = SessionStatus.PAUSED
        logger.info("Paused")
        return True

    def resume(self) -> bool:
        if self.state.status != SessionStatus.PAUSED:
            return False
        self.state.status = SessionStatus.RUNNING
        logger.info("Resumed")
        return True

    def toggle_pause(self) -> bool:
        if self.state.status == SessionStatus.RUNNING:
            return self.pause()
        return self.resume()

    def reset(self) -> None:
        self.state = SimulationState.fresh(self.config)
        self.input.release_all()
        self._last_input = None
        logger.info("Reset to idle")

    def step(self, inp: ShipInput | None = None, dt: float = 1.0) -> list[dict]:
        """Advance one tick; reads the latched input when ``inp`` is None. No-op unless running."""
        if inp is None:
            inp = self.input.snapshot()
        self._last_input = inp
        return self.sim.step(self.state, inp, dt, self.vocabulary)

    def snapshot(self) -> Snapshot:
        return take_snapshot(self.state, self._last_input)
