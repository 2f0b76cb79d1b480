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
"""Tests settings loading."""

from pathlib import Path

import pytest
from asciibrot.serve.config import Settings
from asciibrot.view import RenderLimits
from pydantic import ValidationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    # Keep a developer's .env and exported settings out of the tests.
    monkeypatch.chdir(tmp_path)
    for name in [
        "ASCIIBROT_HOST",
        "ASCIIBROT_PORT",
        "ASCIIBROT_GALLERY_PATH",
        "ASCIIBROT_MAX_WIDTH",
        "ASCIIBROT_LOGS_CONSOLE_LEVEL",
        "ASCIIBROT_METRICS_ENABLED",
    ]:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = Settings()
    assert settings.host == "0.0.0.0"
    assert settings.port == 8080
    assert settings.gallery_path == Path("mandelbrot_gallery.txt")
    assert settings.logs_console_level == "INFO"
    assert settings.logs_file_level is None
    assert settings.structured_logging is False
    assert settings.metrics_enabled is True
    assert settings.render_limits == RenderLimits(200, 100, 1000)


def test_alias_override() -> None:
    settings = Settings(ASCIIBROT_PORT=9000, ASCIIBROT_MAX_WIDTH=120)
    assert settings.port == 9000
    assert settings.render_limits.max_width == 120


def test_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ASCIIBROT_GALLERY_PATH", "/tmp/art.txt")
    monkeypatch.setenv("ASCIIBROT_METRICS_ENABLED", "false")
    settings = Settings()
    assert settings.gallery.path == Path("/tmp/art.txt")
    assert settings.metrics_enabled is False


def test_dotenv_file(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("ASCIIBROT_HOST=127.0.0.1\n")
    assert Settings().host == "127.0.0.1"


def test_log_level__normalized() -> None:
    settings = Settings(
        ASCIIBROT_LOGS_CONSOLE_LEVEL="debug", ASCIIBROT_LOGS_FILE_LEVEL="error"
    )
    assert settings.logs_console_level == "DEBUG"
    assert settings.logs_file_level == "ERROR"


def test_log_level__invalid() -> None:
    with pytest.raises(ValidationError, match="unknown log level"):
        Settings(ASCIIBROT_LOGS_CONSOLE_LEVEL="chatty")


@pytest.mark.parametrize("port", [0, 65536])
def test_port__out_of_range(port: int) -> None:
    with pytest.raises(ValidationError):
        Settings(ASCIIBROT_PORT=port)


def test_limits__below_renderable() -> None:
    with pytest.raises(ValidationError):
        Settings(ASCIIBROT_MAX_HEIGHT=1)
