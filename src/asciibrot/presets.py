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

"""Named regions of interest of the Mandelbrot set."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional

from asciibrot.view import View


@dataclass(frozen=True)
class Preset:
    name: str
    view: View
    # Regions reached by zooming keep the zoom they were found with, so the
    # batch run can label them.
    center: Optional[complex] = None
    zoom: Optional[float] = None

    @property
    def title(self) -> str:
        return self.view.title

    @property
    def is_zoom(self) -> bool:
        return self.center is not None and self.zoom is not None

    def to_dict(self) -> dict[str, object]:
        view = self.view
        return {
            "name": self.name,
            "title": view.title,
            "width": view.width,
            "height": view.height,
            "maxiter": view.max_iter,
            "xmin": view.x_min,
            "xmax": view.x_max,
            "ymin": view.y_min,
            "ymax": view.y_max,
        }


def _preset(
    name: str,
    title: str,
    bounds: tuple[float, float, float, float],
    max_iter: int = 100,
    center: Optional[complex] = None,
    zoom: Optional[float] = None,
) -> tuple[str, Preset]:
    x_min, x_max, y_min, y_max = bounds
    view = View(80, 40, max_iter, x_min, x_max, y_min, y_max, title=title)
    return name, Preset(name, view, center=center, zoom=zoom)


PRESETS: Mapping[str, Preset] = MappingProxyType(
    dict(
        [
            _preset("full", "Full Mandelbrot Set", (-2.5, 1.0, -1.25, 1.25)),
            _preset(
                "seahorse",
                "Seahorse Valley",
                (-0.8, -0.7, 0.05, 0.15),
                center=complex(-0.75, 0.1),
                zoom=20,
            ),
            _preset(
                "spiral",
                "Spiral Region",
                (-0.18, -0.14, 1.02, 1.06),
                center=complex(-0.16, 1.04),
                zoom=50,
            ),
            _preset(
                "lightning",
                "Lightning Region",
                (-1.26, -1.24, 0.01, 0.03),
                center=complex(-1.25, 0.02),
                zoom=100,
            ),
            _preset(
                "highdetail",
                "High Detail View",
                (-0.8, -0.7, 0.05, 0.15),
                max_iter=200,
            ),
        ]
    )
)


def get_preset(name: str) -> Preset:
    try:
        return PRESETS[name]
    except KeyError:
        known = ", ".join(PRESETS)
        raise KeyError(f"Unknown preset {name!r}; known presets: {known}") from None
