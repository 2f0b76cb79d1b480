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

"""HTML pages served by the generator."""

from functools import lru_cache
from pathlib import Path

import jinja2

from asciibrot.presets import PRESETS
from asciibrot.view import DEFAULT_VIEW, RenderLimits

TEMPLATE_DIR = Path(__file__).parent / "templates"


@lru_cache
def environment() -> jinja2.Environment:
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(TEMPLATE_DIR),
        autoescape=jinja2.select_autoescape(["html"]),
        undefined=jinja2.StrictUndefined,
        keep_trailing_newline=True,
    )


def render_index(limits: RenderLimits) -> str:
    """The generator form, with one quick-select button per preset."""
    presets = list(PRESETS.values())
    template = environment().get_template("index.html")
    return template.render(
        presets=presets,
        preset_params={preset.name: preset.to_dict() for preset in presets},
        default=DEFAULT_VIEW,
        limits=limits,
    )


def render_gallery(content: str) -> str:
    # Autoescaped: entry titles are free-form text.
    template = environment().get_template("gallery.html")
    return template.render(content=content)
