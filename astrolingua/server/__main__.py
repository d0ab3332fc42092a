# astrolingua/server/__main__.py
"""Entry point: python -m astrolingua.server"""

from __future__ import annotations

import argparse
import asyncio
import signal
from pathlib import Path
from typing import TYPE_CHECKING

import uvicorn

from .config import settings

if TYPE_CHECKING:
    from fastapi import FastAPI


async def run_server(app: FastAPI, host: str, port: int) -> None:
    server = uvicorn.Server(uvicorn.Config(app, host=host, port=port))

    def handle_exit() -> None:
        # Open /events streams would otherwise hold uvicorn's graceful shutdown.
        app.state.hub.close_all()
        server.should_exit = True

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, handle_exit)

    await server.serve()


def main() -> None:
    parser = argparse.ArgumentParser(description="AstroLingua play server")
    parser.add_argument("--host", type=str, default=settings.HOST)
    parser.add_argument("--port", type=int, default=settings.PORT)
    parser.add_argument("--seed", type=int, default=settings.SEED)
    parser.add_argument("--vocab", type=Path, default=settings.VOCAB_PATH, help="CSV or JSON vocabulary file")
    args = parser.parse_args()

    settings.SEED = args.seed
    settings.VOCAB_PATH = args.vocab

    from . import create_app

    asyncio.run(run_server(create_app(), args.host, args.port))


if __name__ == "__main__":
    main()
