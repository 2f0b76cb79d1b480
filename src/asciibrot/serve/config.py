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

"""Runtime configuration for the renderer, the gallery and the server."""

import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from asciibrot.gallery import Gallery
from asciibrot.view import RenderLimits


def _validate_level(level: str) -> str:
    level = level.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"unknown log level {level!r}")
    return level


class Settings(BaseSettings):
    # Settings are read from the environment or a .env file using the
    # ASCIIBROT_ aliases. Explicit overrides must use the alias too:
    #   Settings(ASCIIBROT_PORT=9000)
    # Settings(port=9000) is silently ignored.

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="",
        extra="allow",
        populate_by_name=False,
    )

    # Server configuration
    host: str = Field(
        description="Hostname to use", default="0.0.0.0", alias="ASCIIBROT_HOST"
    )
    port: int = Field(
        description="Port to use",
        default=8080,
        ge=1,
        le=65535,
        alias="ASCIIBROT_PORT",
    )

    # Gallery
    gallery_path: Path = Field(
        description="Append-only file saved frames are written to",
        default=Path("mandelbrot_gallery.txt"),
        alias="ASCIIBROT_GALLERY_PATH",
    )

    # Limits on frames requested over HTTP
    max_width: int = Field(
        description="Widest frame served over HTTP",
        default=200,
        ge=2,
        alias="ASCIIBROT_MAX_WIDTH",
    )
    max_height: int = Field(
        description="Tallest frame served over HTTP",
        default=100,
        ge=2,
        alias="ASCIIBROT_MAX_HEIGHT",
    )
    max_iterations: int = Field(
        description="Largest iteration count served over HTTP",
        default=1000,
        ge=1,
        alias="ASCIIBROT_MAX_ITERATIONS",
    )

    # Logging and metrics
    logs_console_level: str = Field(
        default="INFO",
        description="Logging level",
        alias="ASCIIBROT_LOGS_CONSOLE_LEVEL",
    )
    logs_file_level: Union[str, None] = Field(
        default=None,
        description="File log level",
        alias="ASCIIBROT_LOGS_FILE_LEVEL",
    )
    logs_file_path: Union[str, None] = Field(
        default=None,
        description="Logs file path",
        alias="ASCIIBROT_LOGS_FILE_PATH",
    )
    structured_logging: bool = Field(
        default=False,
        description="Emit logs as JSON objects",
        alias="ASCIIBROT_STRUCTURED_LOGGING",
    )
    metrics_enabled: bool = Field(
        default=True,
        description="Expose Prometheus metrics at /metrics",
        alias="ASCIIBROT_METRICS_ENABLED",
    )

    @field_validator("logs_console_level")
    def validate_console_level(cls, level: str) -> str:
        return _validate_level(level)

    @field_validator("logs_file_level")
    def validate_file_level(cls, level: Optional[str]) -> Optional[str]:
        if level is None:
            return None
        return _validate_level(level)

    @property
    def render_limits(self) -> RenderLimits:
        return RenderLimits(
            max_width=self.max_width,
            max_height=self.max_height,
            max_iterations=self.max_iterations,
        )

    @property
    def gallery(self) -> Gallery:
        return Gallery(self.gallery_path)
