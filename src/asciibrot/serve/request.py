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
import uuid
from collections.abc import AsyncIterator
from typing import Callable

from fastapi import FastAPI, Request, Response
from fastapi.responses import PlainTextResponse

from asciibrot.telemetry.metrics import METRICS
from asciibrot.telemetry.stopwatch import StopWatch

logger = logging.getLogger(__name__)


def register_request(app: FastAPI) -> None:
    @app.middleware("http")
    async def request_session(request: Request, call_next: Callable):
        request_id = uuid.uuid4().hex
        request.state.request_id = request_id
        request_timer = StopWatch()
        try:
            response: Response = await call_next(request)
        except Exception:
            logger.exception("Exception in request session : %s", request_id)
            response = PlainTextResponse("Internal Server Error", status_code=500)

        def finish() -> None:
            elapsed_ms = request_timer.elapsed_ms
            METRICS.request(request.url.path, response.status_code, elapsed_ms)
            logger.debug(
                "%s %s -> %d (%s, %.2fms)",
                request.method,
                request.url.path,
                response.status_code,
                request_id,
                elapsed_ms,
            )

        response.headers["X-Request-ID"] = request_id
        body_iterator = getattr(response, "body_iterator", None)
        if body_iterator is None:
            finish()
            return response

        # Streamed bodies are rendered after call_next returns; the request
        # ends when the last chunk has been sent.
        async def observed_body() -> AsyncIterator[bytes]:
            try:
                async for chunk in body_iterator:
                    yield chunk
            except Exception:
                logger.exception(
                    "Exception while streaming response : %s", request_id
                )
                raise
            finally:
                finish()

        response.body_iterator = observed_body()
        return response
