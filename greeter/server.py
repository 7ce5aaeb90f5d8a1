"""uvicorn server that announces the port once the socket is bound."""

import logging
import socket

import uvicorn
from fastapi import FastAPI

from greeter.config import Settings

logger = logging.getLogger(__name__)


class GreeterServer(uvicorn.Server):
    async def startup(self, sockets: list[socket.socket] | None = None) -> None:
        # uvicorn exits with a non-zero status on bind failure before returning here
        await super().startup(sockets=sockets)
        if self.started:
            logger.info(f"Listening on port {self.config.port}")


def build_server(app: FastAPI, settings: Settings) -> GreeterServer:
    config = uvicorn.Config(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    return GreeterServer(config)
