"""HTTP server lifecycle for the document store API."""

import asyncio
from typing import Optional

import uvicorn
from fastapi import FastAPI

from app.core.config import Settings, settings as default_settings
from app.core.logger import get_logger
from app.main import create_app

logger = get_logger(__name__)


class DocumentServer:
    """
    Owns one uvicorn server bound to the configured host and port.
    
    ``run()`` blocks until the process is terminated. ``start()`` and
    ``stop()`` serve from a background task so tests can run isolated
    server instances inside an event loop.
    """

    def __init__(self, settings: Optional[Settings] = None, app: Optional[FastAPI] = None):
        self.settings = settings or default_settings
        self.app = app or create_app(self.settings)
        self._server: Optional[uvicorn.Server] = None
        self._task: Optional[asyncio.Task] = None

    def _build_server(self) -> uvicorn.Server:
        config = uvicorn.Config(
            self.app,
            host=self.settings.host,
            port=self.settings.port,
            log_level=self.settings.log_level.lower(),
        )
        return uvicorn.Server(config)

    @property
    def is_running(self) -> bool:
        return self._server is not None and self._server.started

    @property
    def bound_port(self) -> Optional[int]:
        """Port actually listened on, useful when configured with port 0."""
        if not self.is_running or not self._server.servers:
            return None
        sockets = self._server.servers[0].sockets
        return sockets[0].getsockname()[1] if sockets else None

    def run(self) -> None:
        """Serve until the process is terminated."""
        self._server = self._build_server()
        logger.info(f"Listening on port {self.settings.port}...")
        self._server.run()

    async def start(self) -> None:
        """Start serving in a background task and wait until the socket is bound."""
        if self._task is not None:
            raise RuntimeError("Server is already running")

        self._server = self._build_server()
        logger.info(f"Listening on port {self.settings.port}...")
        self._task = asyncio.create_task(self._server.serve())

        while not self._server.started:
            if self._task.done():
                server_task, self._task, self._server = self._task, None, None
                server_task.result()
                raise RuntimeError("Server exited during startup")
            await asyncio.sleep(0.05)

    async def stop(self) -> None:
        """Ask the server to exit and wait for it to finish."""
        if self._task is None:
            return
        self._server.should_exit = True
        try:
            await self._task
        finally:
            self._task = None
            self._server = None
            logger.info("Server stopped")


def main() -> None:
    DocumentServer().run()


if __name__ == "__main__":
    main()
