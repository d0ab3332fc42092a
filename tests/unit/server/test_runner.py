# tests/unit/server/test_runner.py
"""Tests for the background game loop."""

import asyncio
import json
import logging

from astrolingua import GameConfig, Session, SessionStatus
from astrolingua.server.runner import SessionRunner
from astrolingua.server.sse import SnapshotHub


def test_loop_steps_running_session():
    session = Session(GameConfig(seed=5))
    session.start()

    async def scenario():
        runner = SessionRunner(session, SnapshotHub(), tick_hz=200.0)
        runner.start()
        assert runner.running
        await asyncio.sleep(0.1)
        await runner.stop()
        assert not runner.running

    asyncio.run(scenario())
    assert session.state.tick > 0


def test_loop_leaves_idle_session_alone():
    session = Session(GameConfig(seed=5))

    async def scenario():
        runner = SessionRunner(session, SnapshotHub(), tick_hz=200.0)
        runner.start()
        await asyncio.sleep(0.05)
        await runner.stop()

    asyncio.run(scenario())
    assert session.status == SessionStatus.IDLE
    assert session.state.tick == 0


def test_loop_streams_latest_snapshot_to_viewer():
    session = Session(GameConfig(seed=5))
    session.start()

    async def scenario():
        hub = SnapshotHub()
        client = await hub.register()
        runner = SessionRunner(session, hub, tick_hz=200.0)
        runner.start()
        await asyncio.sleep(0.1)
        await runner.stop()
        return client.pending

    frame_id, event_type, data = asyncio.run(scenario())
    payload = json.loads(data)
    assert event_type == "snapshot"
    assert frame_id == session.state.tick
    assert payload["snapshot"]["tick"] == session.state.tick
    assert isinstance(payload["events"], list)


def test_loop_crash_is_logged(monkeypatch, caplog):
    session = Session(GameConfig(seed=5))
    session.start()

    def broken_step(inp=None, dt=1.0):
        raise RuntimeError("broken step")

    monkeypatch.setattr(session, "step", broken_step)

    async def scenario():
        runner = SessionRunner(session, SnapshotHub(), tick_hz=200.0)
        runner.start()
        await asyncio.sleep(0.05)
        assert not runner.running
        await runner.stop()

    with caplog.at_level(logging.ERROR, logger="astrolingua.server"):
        asyncio.run(scenario())
    assert "Game loop crashed" in caplog.text
    assert "broken step" in caplog.text


def test_advance_stops_at_game_over():
    session = Session(GameConfig(seed=5))
    session.start()
    session.state.lives = 1
    session.state.ship.invuln = 0.0
    target = session.state.targets[0]
    target.pos[:] = session.state.ship.pos
    target.vel[:] = 0.0

    runner = SessionRunner(session, SnapshotHub())
    events = runner.advance(10, 1.0)
    assert [e["type"] for e in events][-1] == "game_over"
    assert session.state.tick == 1
