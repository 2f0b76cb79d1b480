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

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from asciibrot.serve.config import Settings
from asciibrot.serve.pages import render_gallery

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/gallery", response_model=None)
async def gallery(request: Request) -> Response:
    """The saved frames, newest last."""
    settings: Settings = request.app.state.settings
    try:
        content = settings.gallery.read()
    except FileNotFoundError:
        return PlainTextResponse("Gallery not found\n", status_code=404)
    except OSError:
        logger.exception("Failed to read gallery %s", settings.gallery_path)
        return PlainTextResponse("Gallery unavailable\n", status_code=500)
    return HTMLResponse(render_gallery(content))
