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

"""Prometheus instruments for renders, gallery writes and HTTP requests."""

from typing import Literal

from prometheus_client import (
    REGISTRY,
    CollectorRegistry,
    Counter,
    Histogram,
    disable_created_metrics,
    make_asgi_app,
)

RenderSource = Literal["cli", "http"]

# Render times span a few ms (small zooms) to seconds (max-size frames).
RENDER_BUCKETS_MS = (1, 5, 10, 25, 50, 100, 250, 500, 1000, 2500, 5000, 10000)


class Metrics:
    """All instruments exported by asciibrot, bound to one registry."""

    def __init__(self, registry: CollectorRegistry = REGISTRY) -> None:
        self.registry = registry
        self.render_count = Counter(
            "asciibrot_render_count",
            "Frames rendered",
            ["source"],
            registry=registry,
        )
        self.render_time = Histogram(
            "asciibrot_render_time_ms",
            "Time spent rendering a frame",
            ["source"],
            unit="ms",
            buckets=RENDER_BUCKETS_MS,
            registry=registry,
        )
        self.pixel_count = Counter(
            "asciibrot_pixel_count",
            "Pixels evaluated",
            registry=registry,
        )
        self.gallery_append_count = Counter(
            "asciibrot_gallery_append_count",
            "Frames appended to the gallery",
            registry=registry,
        )
        self.request_count = Counter(
            "asciibrot_request_count",
            "HTTP request count",
            ["path", "status"],
            registry=registry,
        )
        self.request_time = Histogram(
            "asciibrot_request_time_ms",
            "Time spent in requests",
            ["path"],
            unit="ms",
            buckets=RENDER_BUCKETS_MS,
            registry=registry,
        )

    def render(self, source: RenderSource, pixels: int, elapsed_ms: float) -> None:
        self.render_count.labels(source=source).inc()
        self.render_time.labels(source=source).observe(elapsed_ms)
        self.pixel_count.inc(pixels)

    def gallery_append(self) -> None:
        self.gallery_append_count.inc()

    def request(self, path: str, status: int, elapsed_ms: float) -> None:
        self.request_count.labels(path=path, status=str(status)).inc()
        self.request_time.labels(path=path).observe(elapsed_ms)


METRICS = Metrics()


def make_metrics_app(metrics: Metrics = METRICS):
    disable_created_metrics()
    return make_asgi_app(registry=metrics.registry)
