import logging
import os
import signal
from typing import Optional

import uvicorn

from .config import Settings
from .main import create_app
from .utils import now_iso

logger = logging.getLogger(__name__)


def shutdown(signum: int, frame=None) -> None:
    """Log the signal and exit immediately with status 0.

    In-flight requests are not drained. ``os._exit`` skips the event loop and
    the threadpool, so a running burn cannot hold the process open.
    """
    name = signal.Signals(signum).name
    logger.info("[%s] Received %s. Shutting down...", now_iso(), name)
    logging.shutdown()
    os._exit(0)


class DemoServer(uvicorn.Server):
    """uvicorn server that exits on SIGTERM/SIGINT without draining."""

    def handle_exit(self, sig: int, frame) -> None:  # type: ignore[override]
        shutdown(sig, frame)

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        if self.started:
            logger.info("Server listening on port %d", self.config.port)


def run(settings: Optional[Settings] = None) -> None:
    settings = settings or Settings.from_env()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = uvicorn.Config(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    DemoServer(config).run()
