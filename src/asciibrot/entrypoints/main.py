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


import functools
import json
import logging
import sys
from typing import Optional

import click
from pydantic import ValidationError

from asciibrot.entrypoints.batch import render_echoed, run_batch
from asciibrot.presets import PRESETS
from asciibrot.render import zoom_label
from asciibrot.serve.config import Settings
from asciibrot.telemetry.common import configure_logging
from asciibrot.telemetry.metrics import METRICS
from asciibrot.view import (
    DEFAULT_VIEW,
    InvalidViewError,
    View,
    check_view,
    zoom_view,
)

logger = logging.getLogger(__name__)


class AsciibrotGroup(click.Group):
    def get_command(self, ctx, cmd_name):
        rv = click.Group.get_command(self, ctx, cmd_name)
        if rv is not None:
            return rv
        supported = ", ".join(self.list_commands(ctx))
        ctx.fail(
            f"Command not supported: {cmd_name}\nSupported commands:"
            f" {supported}"
        )


@click.command(cls=AsciibrotGroup, invoke_without_command=True)
@click.option(
    "--log-level",
    type=click.Choice(
        ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False
    ),
    default=None,
    help="Console log level. Overrides ASCIIBROT_LOGS_CONSOLE_LEVEL.",
)
@click.pass_context
def main(ctx: click.Context, log_level: Optional[str]):
    """Render the Mandelbrot set as ASCII art.

    Without a command, renders every preset region, prints them and saves
    them to the gallery file.
    """
    try:
        settings = Settings()
    except ValidationError as e:
        raise click.ClickException(f"invalid settings: {e}") from e
    if log_level is not None:
        settings = settings.model_copy(
            update={"logs_console_level": log_level.upper()}
        )
    configure_logging(settings)
    ctx.obj = settings
    if ctx.invoked_subcommand is None:
        ctx.invoke(cli_batch)


def view_options(func):
    @click.option(
        "--width", type=int, default=None, help="Frame width in characters."
    )
    @click.option(
        "--height", type=int, default=None, help="Frame height in lines."
    )
    @click.option(
        "--max-iter",
        type=int,
        default=None,
        help="Iterations before a point is presumed to be in the set.",
    )
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        return func(*args, **kwargs)

    return wrapper


def save_option(func):
    @click.option(
        "--save",
        is_flag=True,
        show_default=True,
        default=False,
        help="Append the frame to the gallery file.",
    )
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        return func(*args, **kwargs)

    return wrapper


def _pick(value, default):
    return default if value is None else value


def checked(view: View) -> View:
    try:
        return check_view(view)
    except InvalidViewError as e:
        raise click.UsageError(str(e)) from e


def save_frame(settings: Settings, art: str, title: str) -> None:
    gallery = settings.gallery
    try:
        gallery.append(art, title)
    except OSError as e:
        logger.error("Failed to save %r to %s: %s", title, gallery.path, e)
        raise click.ClickException(f"could not save to {gallery.path}: {e}")
    METRICS.gallery_append()
    logger.info("Saved %r to %s", title, gallery.path)


@main.command(name="batch")
@click.option(
    "--no-save",
    is_flag=True,
    default=False,
    help="Print the frames without appending them to the gallery.",
)
@click.pass_obj
def cli_batch(settings: Settings, no_save: bool):
    """Render every preset region and save them to the gallery.

    The full set is rendered first, followed by the zoomed regions and the
    high-detail view, then a legend of the gradient characters.
    """
    gallery = None if no_save else settings.gallery
    try:
        run_batch(sys.stdout, gallery)
    except OSError as e:
        logger.error("Batch run failed: %s", e)
        raise click.ClickException(
            f"could not save to {settings.gallery_path}: {e}"
        )


@main.command(name="render")
@click.option(
    "--preset",
    type=click.Choice(list(PRESETS)),
    default=None,
    help="Start from a preset region.",
)
@view_options
@click.option("--x-min", type=float, default=None)
@click.option("--x-max", type=float, default=None)
@click.option("--y-min", type=float, default=None)
@click.option("--y-max", type=float, default=None)
@click.option(
    "--no-header",
    is_flag=True,
    default=False,
    help="Print only the frame rows.",
)
@save_option
@click.pass_obj
def cli_render(
    settings: Settings,
    preset: Optional[str],
    no_header: bool,
    save: bool,
    **overrides,
):
    """Render a single frame.

    Explicit options override the preset, or the full view when no preset
    is given.
    """
    base = PRESETS[preset].view if preset else DEFAULT_VIEW
    view = checked(
        View(
            width=_pick(overrides["width"], base.width),
            height=_pick(overrides["height"], base.height),
            max_iter=_pick(overrides["max_iter"], base.max_iter),
            x_min=_pick(overrides["x_min"], base.x_min),
            x_max=_pick(overrides["x_max"], base.x_max),
            y_min=_pick(overrides["y_min"], base.y_min),
            y_max=_pick(overrides["y_max"], base.y_max),
            title=base.title,
        )
    )
    art = render_echoed(sys.stdout, view, echo_header=not no_header)
    if save:
        save_frame(settings, art, view.title)


@main.command(name="zoom")
@click.option("--center-x", type=float, default=-0.75, show_default=True)
@click.option("--center-y", type=float, default=0.1, show_default=True)
@click.option(
    "--zoom",
    type=click.FloatRange(min=0, min_open=True),
    default=20.0,
    show_default=True,
    help="Magnification; the view spans 2/zoom on each axis.",
)
@view_options
@click.option("--title", type=str, default="Zoomed View", show_default=True)
@save_option
@click.pass_obj
def cli_zoom(
    settings: Settings,
    center_x: float,
    center_y: float,
    zoom: float,
    width: Optional[int],
    height: Optional[int],
    max_iter: Optional[int],
    title: str,
    save: bool,
):
    """Render a square region around a point, labelled with the zoom."""
    view = checked(
        zoom_view(
            complex(center_x, center_y),
            zoom,
            width=_pick(width, DEFAULT_VIEW.width),
            height=_pick(height, DEFAULT_VIEW.height),
            max_iter=_pick(max_iter, DEFAULT_VIEW.max_iter),
            title=title,
        )
    )
    out = sys.stdout
    label = zoom_label(zoom)
    out.write(label)
    art = render_echoed(out, view, prefix=label)
    if save:
        save_frame(settings, art, title)


@main.command(name="presets")
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    show_default=True,
    default=False,
    help="Print the presets in JSON format.",
)
def cli_presets(as_json: bool):
    """List the preset regions."""
    if as_json:
        click.echo(
            json.dumps([preset.to_dict() for preset in PRESETS.values()], indent=2)
        )
        return
    for preset in PRESETS.values():
        view = preset.view
        click.echo(
            f"{preset.name:<12}{view.title:<22}{view.width}x{view.height}"
            f"  iter={view.max_iter:<5}"
            f" x[{view.x_min}, {view.x_max}] y[{view.y_min}, {view.y_max}]"
        )


@main.command(name="serve")
@click.option("--host", type=str, default=None, help="Overrides ASCIIBROT_HOST.")
@click.option(
    "--port",
    type=click.IntRange(min=1, max=65535),
    default=None,
    help="Overrides ASCIIBROT_PORT.",
)
@click.pass_obj
def cli_serve(settings: Settings, host: Optional[str], port: Optional[int]):
    """Start the HTTP generator and gallery viewer."""
    from asciibrot.serve.api_server import serve

    update = {}
    if host is not None:
        update["host"] = host
    if port is not None:
        update["port"] = port
    serve(settings.model_copy(update=update))


if __name__ == "__main__":
    main()
