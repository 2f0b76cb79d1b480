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

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from asciibrot.serve.config import Settings
from asciibrot.telemetry import common
from hypothesis import settings

TESTDATA = Path(__file__).parent / "testdata"

# Rendering is pure Python; rely on the test timeout rather than deadlines.
settings.register_profile("asciibrot_tests", deadline=None)
settings.load_profile("asciibrot_tests")


@pytest.fixture
def testdata() -> Path:
    return TESTDATA


@pytest.fixture
def full_frame() -> str:
    """Recorded rows of the full preset, without the header."""
    return (TESTDATA / "full_80x40.txt").read_text(encoding="utf-8")


@pytest.fixture
def batch_transcript() -> str:
    return (TESTDATA / "batch_stdout.txt").read_text(encoding="utf-8")


@pytest.fixture
def gallery_path(tmp_path: Path) -> Path:
    return tmp_path / "gallery.txt"


@pytest.fixture
def server_settings(gallery_path: Path) -> Settings:
    return Settings(
        ASCIIBROT_GALLERY_PATH=gallery_path,
        ASCIIBROT_LOGS_CONSOLE_LEVEL="WARNING",
    )


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    yield
    root = logging.getLogger()
    for handler in common._installed_handlers:
        root.removeHandler(handler)
        handler.close()
    common._installed_handlers.clear()
