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
"""Tests the asciibrot command line."""

import importlib
import json
import warnings
from pathlib import Path

import pytest
from asciibrot.entrypoints.main import main
from asciibrot.presets import PRESETS
from asciibrot.serve.config import Settings
from click.testing import CliRunner

GALLERY = "mandelbrot_gallery.txt"

# The package re-exports render(), which shadows the submodule attribute.
render_module = importlib.import_module("asciibrot.render")


@pytest.fixture
def runner(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> CliRunner:
    # Every command runs in an empty directory: no .env, no gallery.
    monkeypatch.chdir(tmp_path)
    for name in ["ASCIIBROT_GALLERY_PATH", "ASCIIBROT_LOGS_CONSOLE_LEVEL"]:
        monkeypatch.delenv(name, raising=False)
    return CliRunner()


def invoke(runner: CliRunner, *args: str):
    return runner.invoke(main, ["--log-level", "WARNING", *args])


def read_gallery() -> str:
    return Path(GALLERY).read_text(encoding="utf-8")


def seahorse_block(transcript: str) -> str:
    lines = transcript.splitlines(keepends=True)
    start = lines.index("Zoomed view (zoom: 20.0x)\n")
    return "".join(lines[start : start + 45])


def test_batch__default_command(runner: CliRunner, batch_transcript: str) -> None:
    result = invoke(runner)
    assert result.exit_code == 0, result.output
    assert result.stdout == batch_transcript
    gallery = read_gallery()
    assert gallery.startswith("MANDELBROT ASCII ART GALLERY\n")
    types = [line for line in gallery.splitlines() if line.startswith("Type: ")]
    assert types == [f"Type: {preset.title}" for preset in PRESETS.values()]
    assert (
        "Type: Seahorse Valley\n\n"
        "Zoomed view (zoom: 20.0x)\n"
        "Mandelbrot Set ASCII Art (80x40)\n"
    ) in gallery
    assert seahorse_block(batch_transcript) in gallery


def test_batch__appends_on_rerun(runner: CliRunner) -> None:
    invoke(runner, "batch")
    invoke(runner, "batch")
    gallery = read_gallery()
    assert gallery.count("MANDELBROT ASCII ART GALLERY") == 1
    assert gallery.count("Type: ") == 2 * len(PRESETS)


def test_batch__no_save(runner: CliRunner, batch_transcript: str) -> None:
    result = invoke(runner, "batch", "--no-save")
    assert result.exit_code == 0, result.output
    assert not Path(GALLERY).exists()
    expected = batch_transcript[: batch_transcript.rindex("ASCII art saved")]
    assert result.stdout == expected


def test_batch__unwritable_gallery(
    runner: CliRunner, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("ASCIIBROT_GALLERY_PATH", "missing/gallery.txt")
    result = invoke(runner, "batch")
    assert result.exit_code == 1
    assert "could not save to missing/gallery.txt" in result.stderr


@pytest.mark.parametrize("command", [[], ["presets"], ["render"]])
def test_invalid_settings__reported_as_error(
    runner: CliRunner, monkeypatch: pytest.MonkeyPatch, command: list[str]
) -> None:
    monkeypatch.setenv("ASCIIBROT_LOGS_CONSOLE_LEVEL", "chatty")
    result = runner.invoke(main, command)
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Error: invalid settings:" in result.stderr
    assert "unknown log level" in result.stderr
    assert result.stdout == ""


def test_invalid_settings__from_dotenv(runner: CliRunner) -> None:
    Path(".env").write_text("ASCIIBROT_PORT=0\n")
    result = invoke(runner, "presets")
    assert result.exit_code == 1
    assert "Error: invalid settings:" in result.stderr


def test_render__full_without_header(runner: CliRunner, full_frame: str) -> None:
    result = invoke(runner, "render", "--preset", "full", "--no-header")
    assert result.exit_code == 0, result.output
    assert result.stdout == full_frame


def test_render__overrides(runner: CliRunner) -> None:
    result = invoke(
        runner, "render", "--width", "20", "--height", "8", "--max-iter", "30"
    )
    assert result.exit_code == 0, result.output
    lines = result.stdout.splitlines()
    assert lines[0] == "Mandelbrot Set ASCII Art (20x8)"
    assert lines[1] == "Range: x[-2.50, 1.00], y[-1.25, 1.25]"
    assert lines[2] == "Max iterations: 30"
    assert [len(line) for line in lines[4:]] == [20] * 8


def test_render__no_click_deprecations(runner: CliRunner) -> None:
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        result = invoke(runner, "render", "--width", "10", "--height", "4")
    assert result.exit_code == 0, result.output
    assert not [
        w
        for w in caught
        if issubclass(w.category, DeprecationWarning)
        and "click" in str(w.message).lower()
    ]


@pytest.mark.parametrize(
    "args",
    [
        ["--width", "1"],
        ["--max-iter", "0"],
        ["--x-min", "2", "--x-max", "1"],
        ["--preset", "nowhere"],
    ],
)
def test_render__rejects(runner: CliRunner, args: list[str]) -> None:
    result = invoke(runner, "render", *args)
    assert result.exit_code == 2
    assert result.stdout == ""


def test_render__save(runner: CliRunner) -> None:
    result = invoke(runner, "render", "--preset", "seahorse", "--save")
    assert result.exit_code == 0, result.output
    assert "Type: Seahorse Valley\n\n" + result.stdout in read_gallery()


def test_render__save_without_header_keeps_header(runner: CliRunner) -> None:
    result = invoke(
        runner, "render", "--width", "10", "--height", "4", "--no-header", "--save"
    )
    assert result.exit_code == 0, result.output
    assert not result.stdout.startswith("Mandelbrot Set")
    assert (
        "Type: Custom Generation\n\nMandelbrot Set ASCII Art (10x4)\n"
        "Range: x[-2.50, 1.00], y[-1.25, 1.25]\nMax iterations: 100\n\n"
        + result.stdout
    ) in read_gallery()


@pytest.mark.parametrize("no_header", [[], ["--no-header"]])
def test_render__save_renders_each_row_once(
    runner: CliRunner, monkeypatch: pytest.MonkeyPatch, no_header: list[str]
) -> None:
    rendered_rows: list[int] = []
    render_row = render_module.render_row

    def counting_render_row(view, row):
        rendered_rows.append(row)
        return render_row(view, row)

    monkeypatch.setattr(render_module, "render_row", counting_render_row)
    result = invoke(
        runner, "render", "--width", "12", "--height", "6", *no_header, "--save"
    )
    assert result.exit_code == 0, result.output
    assert rendered_rows == list(range(6))


def test_zoom__seahorse(runner: CliRunner, batch_transcript: str) -> None:
    result = invoke(runner, "zoom")
    assert result.exit_code == 0, result.output
    assert not Path(GALLERY).exists()
    assert result.stdout == seahorse_block(batch_transcript)


def test_zoom__save(runner: CliRunner) -> None:
    result = invoke(
        runner, "zoom", "--zoom", "4", "--width", "12", "--height", "6",
        "--title", "Wide", "--save",
    )
    assert result.exit_code == 0, result.output
    assert result.stdout.startswith("Zoomed view (zoom: 4.0x)\n")
    assert "Type: Wide\n\n" + result.stdout in read_gallery()


@pytest.mark.parametrize("zoom", ["0", "-3"])
def test_zoom__rejects_non_positive(runner: CliRunner, zoom: str) -> None:
    result = invoke(runner, "zoom", "--zoom", zoom)
    assert result.exit_code == 2


def test_presets__table(runner: CliRunner) -> None:
    result = invoke(runner, "presets")
    assert result.exit_code == 0, result.output
    lines = result.stdout.splitlines()
    assert [line.split()[0] for line in lines] == list(PRESETS)
    assert "High Detail View" in lines[-1]
    assert "iter=200" in lines[-1]


def test_presets__json(runner: CliRunner) -> None:
    result = invoke(runner, "presets", "--json")
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == [p.to_dict() for p in PRESETS.values()]


def test_unknown_command(runner: CliRunner) -> None:
    result = invoke(runner, "explode")
    assert result.exit_code == 2
    assert "Command not supported: explode" in result.stderr
    assert "render" in result.stderr


def test_serve__overrides(
    runner: CliRunner, monkeypatch: pytest.MonkeyPatch
) -> None:
    served: list[Settings] = []
    monkeypatch.setattr("asciibrot.serve.api_server.serve", served.append)
    result = invoke(runner, "serve", "--host", "127.0.0.1", "--port", "9001")
    assert result.exit_code == 0, result.output
    assert len(served) == 1
    assert (served[0].host, served[0].port) == ("127.0.0.1", 9001)
    assert served[0].logs_console_level == "WARNING"


def test_serve__rejects_bad_port(runner: CliRunner) -> None:
    result = invoke(runner, "serve", "--port", "70000")
    assert result.exit_code == 2
