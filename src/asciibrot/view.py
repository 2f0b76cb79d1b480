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

"""View parameters: the pixel grid and the region of the complex plane it covers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional


class InvalidViewError(ValueError):
    """A view cannot be rendered."""


@dataclass(frozen=True)
class View:
    width: int
    height: int
    max_iter: int
    x_min: float
    x_max: float
    y_min: float
    y_max: float
    title: str = "Custom Generation"

    def pixel_to_complex(self, col: int, row: int) -> complex:
        """Map pixel ``(col, row)`` linearly onto the bounding rectangle.

        Column 0 and row 0 land on ``x_min`` and ``y_min``; the last column
        and row land on ``x_max`` and ``y_max``.
        """
        x = self.x_min + col * (self.x_max - self.x_min) / (self.width - 1)
        y = self.y_min + row * (self.y_max - self.y_min) / (self.height - 1)
        return complex(x, y)


DEFAULT_VIEW = View(
    width=80,
    height=40,
    max_iter=100,
    x_min=-2.5,
    x_max=1.0,
    y_min=-1.25,
    y_max=1.25,
)


@dataclass(frozen=True)
class RenderLimits:
    """Upper bounds applied to views requested from outside the process."""

    max_width: int
    max_height: int
    max_iterations: int


def zoom_view(
    center: complex,
    zoom: float,
    width: int = DEFAULT_VIEW.width,
    height: int = DEFAULT_VIEW.height,
    max_iter: int = DEFAULT_VIEW.max_iter,
    title: str = "Zoomed View",
) -> View:
    """Square view of side ``2.0 / zoom`` centered on ``center``."""
    size = 2.0 / zoom
    return View(
        width=width,
        height=height,
        max_iter=max_iter,
        x_min=center.real - size / 2,
        x_max=center.real + size / 2,
        y_min=center.imag - size / 2,
        y_max=center.imag + size / 2,
        title=title,
    )


def check_view(view: View, limits: Optional[RenderLimits] = None) -> View:
    """Reject views the renderer cannot handle.

    The renderer divides by ``width - 1`` and ``height - 1`` and assumes a
    non-empty rectangle, so it must only ever see views that pass here.

    Returns:
        The view, unchanged.

    Raises:
        InvalidViewError: describing the first problem found.
    """
    if view.width < 2 or view.height < 2:
        raise InvalidViewError(
            f"width and height must be at least 2, got {view.width}x{view.height}"
        )
    if view.max_iter < 1:
        raise InvalidViewError(
            f"max iterations must be at least 1, got {view.max_iter}"
        )
    bounds = (view.x_min, view.x_max, view.y_min, view.y_max)
    if not all(math.isfinite(bound) for bound in bounds):
        raise InvalidViewError(f"bounds must be finite, got {bounds}")
    if view.x_min >= view.x_max:
        raise InvalidViewError(
            f"x min must be less than x max, got [{view.x_min}, {view.x_max}]"
        )
    if view.y_min >= view.y_max:
        raise InvalidViewError(
            f"y min must be less than y max, got [{view.y_min}, {view.y_max}]"
        )

    if limits is not None:
        if view.width > limits.max_width:
            raise InvalidViewError(
                f"width {view.width} exceeds the limit of {limits.max_width}"
            )
        if view.height > limits.max_height:
            raise InvalidViewError(
                f"height {view.height} exceeds the limit of {limits.max_height}"
            )
        if view.max_iter > limits.max_iterations:
            raise InvalidViewError(
                f"max iterations {view.max_iter} exceeds the limit of"
                f" {limits.max_iterations}"
            )
    return view
