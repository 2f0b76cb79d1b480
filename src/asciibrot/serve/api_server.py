# ===----------------------------------------------------------------------=== #
# Copyright (c) 2025, Modular Inc. All rights reserved.
#
# Licensed under the Apache License v2.0 with LLVM Exceptions:
# https://llvm.org/LICENSE.txt
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
# ===----------------------------------------------------------------------=== #

"""HTTP server for on-demand rendering and the gallery viewer."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from functools import partial

import uvloop
from fastapi import FastAPI
from uvicorn import Config, Server

from asciibrot.serve.config import Settings
from asciibrot.serve.request import register_request
from asciibrot.serve.router import gallery_routes, render_routes
from asciibrot.telemetry.common import configure_logging
from asciibrot.telemetry.metrics import make_metrics_app

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI, settings: Settings):
    logger.info(f"Server ready on http://{settings.host}:{settings.port}")
    logger.info(f"Gallery file: {settings.gallery_path}")
    try:
        yield
    finally:
        logger.info("Server shut down")


def fastapi_app(settings: Settings) -> FastAPI:
    logger.debug(f"Settings: {settings}")
    app = FastAPI(
        title="Mandelbrot ASCII Art Generator",
        lifespan=partial(lifespan, settings=settings),
    )

    if settings.metrics_enabled:
        app.mount("/metrics", make_metrics_app())

    app.include_router(render_routes.router)
    app.include_router(gallery_routes.router)

    app.state.settings = settings
    register_request(app)

    return app


def fastapi_config(app: FastAPI, settings: Settings) -> Config:
    config = Config(
        app=app,
        log_config=None,
        loop="uvloop",
        host=settings.host,
        port=settings.port,
    )

    for route in app.routes:
        logger.debug("Route enabled : %s", route)
    return config


def serve(settings: Settings) -> None:
    """Run the server until interrupted."""
    app = fastapi_app(settings)
    server = Server(fastapi_config(app, settings))
    logger.info(f"Starting server on http://{settings.host}:{settings.port}")
    uvloop.run(server.serve())


def main() -> None:
    settings = Settings()
    configure_logging(settings)
    serve(settings)


if __name__ == "__main__":
    main()
