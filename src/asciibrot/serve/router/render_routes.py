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


import logging
from collections.abc import Iterator, Mapping
from typing import Callable, Optional, TypeVar

from fastapi import APIRouter, Request
from fastapi.responses import (
    HTMLResponse,
    JSONResponse,
    PlainTextResponse,
    Response,
    StreamingResponse,
)

from asciibrot.presets import PRESETS
from asciibrot.render import format_header, iter_rows
from asciibrot.serve.config import Settings
from asciibrot.serve.pages import render_index
from asciibrot.telemetry.metrics import METRICS
from asciibrot.telemetry.stopwatch import StopWatch
from asciibrot.view import DEFAULT_VIEW, InvalidViewError, View, check_view

router = APIRouter()
logger = logging.getLogger(__name__)

Number = TypeVar("Number", int, float)


def _param(
    params: Mapping[str, str],
    name: str,
    parse: Callable[[str], Number],
    default: Number,
) -> Number:
    # Missing, malformed and zero values all fall back to the default.
    raw: Optional[str] = params.get(name)
    if raw is None:
        return default
    try:
        value = parse(raw)
    except ValueError:
        return default
    return value if value else default


def parse_view(params: Mapping[str, str]) -> View:
    """Build the requested view from query parameters.

    Recognised parameters are ``width``, ``height``, ``maxiter``, ``xmin``,
    ``xmax``, ``ymin`` and ``ymax``. The result is not validated.
    """
    return View(
        width=_param(params, "width", int, DEFAULT_VIEW.width),
        height=_param(params, "height", int, DEFAULT_VIEW.height),
        max_iter=_param(params, "maxiter", int, DEFAULT_VIEW.max_iter),
        x_min=_param(params, "xmin", float, DEFAULT_VIEW.x_min),
        x_max=_param(params, "xmax", float, DEFAULT_VIEW.x_max),
        y_min=_param(params, "ymin", float, DEFAULT_VIEW.y_min),
        y_max=_param(params, "ymax", float, DEFAULT_VIEW.y_max),
    )


def stream_frame(view: View) -> Iterator[str]:
    """Frame text for a streaming response, header first, a row at a time."""
    with StopWatch() as sw:
        yield format_header(view)
        for line in iter_rows(view):
            yield line + "\n"
    METRICS.render("http", view.width * view.height, sw.elapsed_ms)
    logger.info(
        "Rendered %dx%d frame (max_iter=%d) in %.2fms",
        view.width,
        view.height,
        view.max_iter,
        sw.elapsed_ms,
    )


@router.get("/", response_class=HTMLResponse)
async def home(request: Request) -> HTMLResponse:
    """The interactive generator page."""
    settings: Settings = request.app.state.settings
    return HTMLResponse(render_index(settings.render_limits))


@router.get("/generate")
async def generate(request: Request) -> Response:
    """Render a frame from query parameters as plain text."""
    settings: Settings = request.app.state.settings
    try:
        view = check_view(
            parse_view(request.query_params), settings.render_limits
        )
    except InvalidViewError as e:
        logger.info("Rejected render request: %s", e)
        return PlainTextResponse(f"Invalid parameters: {e}\n", status_code=400)
    # Sync iterators are consumed in a worker thread.
    return StreamingResponse(stream_frame(view), media_type="text/plain")


@router.get("/presets")
async def presets() -> JSONResponse:
    """The preset catalogue used by the quick-select buttons."""
    return JSONResponse([preset.to_dict() for preset in PRESETS.values()])


@router.get("/health")
async def health() -> Response:
    """Returns server liveness status."""
    return Response(status_code=200)
