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

"""ASCII art renderer for the Mandelbrot set."""

from asciibrot.escape import magnitude_squared, mandelbrot_iterations
from asciibrot.gallery import Gallery
from asciibrot.gradient import GRADIENT, iter_to_char
from asciibrot.presets import PRESETS, Preset, get_preset
from asciibrot.render import (
    format_header,
    iter_rows,
    render,
    render_to,
    render_zoom,
    zoom_label,
)
from asciibrot.view import (
    DEFAULT_VIEW,
    InvalidViewError,
    RenderLimits,
    View,
    check_view,
    zoom_view,
)

__all__ = [
    # Please keep this list alphabetized.
    "DEFAULT_VIEW",
    "GRADIENT",
    "Gallery",
    "InvalidViewError",
    "PRESETS",
    "Preset",
    "RenderLimits",
    "View",
    "check_view",
    "format_header",
    "get_preset",
    "iter_rows",
    "iter_to_char",
    "magnitude_squared",
    "mandelbrot_iterations",
    "render",
    "render_to",
    "render_zoom",
    "zoom_label",
    "zoom_view",
]
