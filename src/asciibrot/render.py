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

"""Frame rendering.

Every frame goes through `render_to`, which writes rows to a text sink as
they are produced. `render` is the same thing with an in-memory sink.
"""

from __future__ import annotations

import io
from collections.abc import Iterator
from typing import Protocol

from asciibrot.escape import mandelbrot_iterations
from asciibrot.gradient import iter_to_char
from asciibrot.view import DEFAULT_VIEW, View, zoom_view


class TextSink(Protocol):
    def write(self, text: str, /) -> object: ...


def format_header(view: View) -> str:
    return (
        f"Mandelbrot Set ASCII Art ({view.width}x{view.height})\n"
        f"Range: x[{view.x_min:.2f}, {view.x_max:.2f}],"
        f" y[{view.y_min:.2f}, {view.y_max:.2f}]\n"
        f"Max iterations: {view.max_iter}\n\n"
    )


def render_row(view: View, row: int) -> str:
    max_iter = view.max_iter
    return "".join(
        iter_to_char(
            mandelbrot_iterations(view.pixel_to_complex(col, row), max_iter),
            max_iter,
        )
        for col in range(view.width)
    )


def iter_rows(view: View) -> Iterator[str]:
    """Yield the rows of a frame, top to bottom, without line endings."""
    for row in range(view.height):
        yield render_row(view, row)


def render_to(sink: TextSink, view: View, include_header: bool = True) -> None:
    """Write a frame to ``sink`` one row at a time.

    Args:
        sink: Anything with a text `write`; nothing is buffered beyond what
            the sink itself buffers.
        view: The view to render. Callers are expected to have passed it
            through `check_view`.
        include_header: Prefix the frame with `format_header`.
    """
    if include_header:
        sink.write(format_header(view))
    for line in iter_rows(view):
        sink.write(line)
        sink.write("\n")


def render(view: View, include_header: bool = True) -> str:
    buffer = io.StringIO()
    render_to(buffer, view, include_header=include_header)
    return buffer.getvalue()


def zoom_label(zoom: float) -> str:
    return f"Zoomed view (zoom: {zoom:.1f}x)\n"


def render_zoom(
    center: complex,
    zoom: float,
    width: int = DEFAULT_VIEW.width,
    height: int = DEFAULT_VIEW.height,
    max_iter: int = DEFAULT_VIEW.max_iter,
) -> str:
    """Render the square view around ``center``, labelled with its zoom."""
    view = zoom_view(center, zoom, width=width, height=height, max_iter=max_iter)
    return zoom_label(zoom) + render(view)
