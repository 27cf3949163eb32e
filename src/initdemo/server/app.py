from __future__ import annotations

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from .. import __version__
from ..config.models import ServerConfig
from .handler import RequestHandler


def create_app(config: ServerConfig | None = None) -> FastAPI:
    config = config or ServerConfig()
    handler = RequestHandler(config)

    app = FastAPI(title="Init Demo API", version=__version__)
    app.state.config = config
    app.state.handler = handler

    @app.get("/")
    async def serve_sample() -> JSONResponse:
        """Run the reader on the sample file and wrap its output."""
        status_code, envelope = await handler.handle()
        return JSONResponse(status_code=status_code, content=envelope.to_json())

    return app
