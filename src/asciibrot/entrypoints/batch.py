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

"""Batch rendering of the preset regions into the gallery."""

from __future__ import annotations

import io
import logging
from typing import Optional

from asciibrot.gallery import Gallery
from asciibrot.presets import PRESETS, Preset
from asciibrot.render import TextSink, format_header, render_to, zoom_label
from asciibrot.telemetry.metrics import METRICS
from asciibrot.telemetry.stopwatch import StopWatch
from asciibrot.view import View, zoom_view

logger = logging.getLogger(__name__)

SECTION_RULE = "=" * 50

LEGEND = """\
ASCII LEGEND:
' ' (space) - Quick escape (not in set)
.:- - Fast escape
=+* - Medium escape time
#%@ - Slow escape / In the set

The darker the character, the more iterations
it took to determine if the point escapes.
"""


class Tee:
    """Text sink that copies every write to several sinks."""

    def __init__(self, *sinks: TextSink) -> None:
        self.sinks = sinks

    def write(self, text: str) -> int:
        for sink in self.sinks:
            sink.write(text)
        return len(text)


def render_echoed(
    out: TextSink, view: View, prefix: str = "", echo_header: bool = True
) -> str:
    """Render ``view`` to ``out`` and return ``prefix`` plus the full frame.

    ``prefix`` is only prepended to the return value; it is not written. The
    returned frame always carries the header, even when ``echo_header`` is
    False and ``out`` only receives the rows.
    """
    buffer = io.StringIO()
    buffer.write(prefix)
    if not echo_header:
        buffer.write(format_header(view))
    with StopWatch() as sw:
        render_to(Tee(out, buffer), view, include_header=echo_header)
    METRICS.render("cli", view.width * view.height, sw.elapsed_ms)
    logger.debug("Rendered %r in %.2fms", view.title, sw.elapsed_ms)
    return buffer.getvalue()


def render_preset(out: TextSink, preset: Preset) -> str:
    """Render one preset the way the batch run shows it.

    Presets found by zooming are rendered from their center and zoom and
    labelled with the zoom factor.
    """
    if preset.is_zoom:
        view = zoom_view(
            preset.center,
            preset.zoom,
            width=preset.view.width,
            height=preset.view.height,
            max_iter=preset.view.max_iter,
            title=preset.title,
        )
        label = zoom_label(preset.zoom)
        out.write("\n" + label)
        return render_echoed(out, view, prefix=label)
    return render_echoed(out, preset.view)


def run_batch(out: TextSink, gallery: Optional[Gallery]) -> list[str]:
    """Render every preset to ``out``, saving each frame to ``gallery``.

    Args:
        out: Where the transcript goes, usually stdout.
        gallery: Gallery to append frames to, or None to skip saving.

    Returns:
        The names of the rendered presets, in order.

    Raises:
        OSError: if a frame cannot be saved.
    """
    full, *regions = PRESETS.values()
    rendered: list[str] = []

    def save(preset: Preset, art: str) -> None:
        rendered.append(preset.name)
        if gallery is None:
            return
        gallery.append(art, preset.title)
        METRICS.gallery_append()

    out.write(f"=== {full.title.upper()} ===\n")
    save(full, render_preset(out, full))

    out.write(f"\n{SECTION_RULE}\n")
    out.write("=== INTERESTING REGIONS ===\n")
    for preset in regions:
        out.write(f"\n--- {preset.title} ---\n")
        save(preset, render_preset(out, preset))

    out.write(f"\n{SECTION_RULE}\n")
    out.write(LEGEND)
    out.write(f"\n{SECTION_RULE}\n")
    if gallery is not None:
        out.write(f"ASCII art saved to {gallery.path}\n")
    logger.info("Rendered %d presets", len(rendered))
    return rendered
