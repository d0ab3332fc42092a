# ruff: noqa: E402
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from astrolingua import GameConfig, Session, SessionStatus, ShipInput


def check_random_play(seed: int, ticks: int) -> None:
    cfg = GameConfig(seed=seed)
    session = Session(cfg)
    session.start()
    rng = np.random.default_rng(seed + 1)

    for t in range(ticks):
        if session.status != SessionStatus.RUNNING:
            session.reset()
            session.start()
        prev_level = session.state.level
        inp = ShipInput.from_array(rng.uniform(-1.0, 1.0, size=4))
        events = session.step(inp, dt=float(rng.uniform(0.5, 2.0)))
        state = session.state

        assert state.score >= 0, f"tick {t}: negative score {state.score}"
        assert state.lives >= 0, f"tick {t}: negative lives {state.lives}"
        for obj in [state.ship, *state.projectiles]:
            x, y = float(obj.pos[0]), float(obj.pos[1])
            assert 0.0 <= x < cfg.width and 0.0 <= y < cfg.height, f"tick {t}: out of field ({x}, {y})"

        advanced = any(e["type"] == "wave" for e in events)
        assert state.level == prev_level + (1 if advanced else 0), f"tick {t}: level jumped"
        if state.status != SessionStatus.IDLE and state.prompt is not None:
            correct = [tg for tg in state.targets if tg.is_correct]
            assert len(correct) <= 1, f"tick {t}: {len(correct)} correct targets"
            if correct:
                assert correct[0].text == state.prompt.zh


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--ticks", type=int, default=5000)
    args = parser.parse_args()

    check_random_play(args.seed, args.ticks)
    print("ok")


if __name__ == "__main__":
    main()
