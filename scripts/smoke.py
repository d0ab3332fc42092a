# ruff: noqa: E402
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from astrolingua import GameConfig, Session, SessionStatus
from astrolingua.agents.autopilot import Autopilot
from astrolingua.vocab import load_vocabulary


def run_episode(session: Session, pilot: Autopilot, max_ticks: int) -> dict:
    session.reset()
    session.start()

    ticks = 0
    shots = 0
    while session.status == SessionStatus.RUNNING and ticks < max_ticks:
        events = session.step(pilot.act(session.state), dt=1.0)
        shots += sum(1 for e in events if e["type"] == "shot")
        ticks += 1

    snap = session.snapshot()
    return {
        "ticks": ticks,
        "shots": shots,
        "status": snap.status,
        "level": snap.level,
        "score": snap.score,
        "lives": snap.lives,
        "accuracy": snap.accuracy,
    }


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--episodes", type=int, default=3)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--max-ticks", type=int, default=3600, help="Tick cap per episode (60 per second)")
    parser.add_argument("--vocab", type=Path, default=None, help="CSV or JSON vocabulary file")
    parser.add_argument("--out", type=str, default=None, help="Write results as JSON here")
    args = parser.parse_args()

    vocabulary = load_vocabulary(args.vocab) if args.vocab is not None else None

    results = []
    for ep in range(args.episodes):
        cfg = GameConfig(seed=args.seed + ep)
        session = Session(cfg, vocabulary=vocabulary)
        pilot = Autopilot(cfg.width, cfg.height)
        result = run_episode(session, pilot, args.max_ticks)
        result["seed"] = args.seed + ep
        results.append(result)
        print(f"episode {ep}: {result}")

    best = max(r["level"] for r in results)
    print(f"best level: {best}")

    if args.out:
        out = Path(args.out)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(json.dumps(results, indent=2), encoding="utf-8")


if __name__ == "__main__":
    main()
