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


import logging

from pythonjsonlogger.json import JsonFormatter

from asciibrot.serve.config import Settings

STRUCTURED_FORMAT = "%(levelname)s %(process)d %(threadName)s %(name)s %(message)s"

# Handlers installed by the last configure_logging call.
_installed_handlers: list[logging.Handler] = []


def _formatter(settings: Settings, datefmt: str) -> logging.Formatter:
    if settings.structured_logging:
        return JsonFormatter(STRUCTURED_FORMAT, timestamp=True)
    return logging.Formatter(
        "%(asctime)s.%(msecs)03d %(levelname)s: %(name)s: %(message)s",
        datefmt=datefmt,
    )


# Configure logging to the console and, optionally, a file. Calling this again
# replaces the handlers installed by the previous call.
def configure_logging(settings: Settings) -> None:
    logging_handlers: list[logging.Handler] = []

    # Console output goes to stderr so frames on stdout stay clean.
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(_formatter(settings, datefmt="%H:%M:%S"))
    console_handler.setLevel(settings.logs_console_level)
    logging_handlers.append(console_handler)

    if (
        settings.logs_file_level is not None
        and settings.logs_file_path is not None
    ):
        file_handler = logging.FileHandler(settings.logs_file_path)
        file_handler.setFormatter(
            _formatter(settings, datefmt="%y:%m:%d-%H:%M:%S")
        )
        file_handler.setLevel(settings.logs_file_level)
        logging_handlers.append(file_handler)

    logger = logging.getLogger()
    for handler in _installed_handlers:
        logger.removeHandler(handler)
        handler.close()
    _installed_handlers[:] = logging_handlers

    # Configure root logger level
    logger_level = min(h.level for h in logging_handlers)
    logger.setLevel(logger_level)
    for handler in logging_handlers:
        logger.addHandler(handler)

    # uvicorn's access log duplicates the request middleware.
    logging.getLogger("uvicorn").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logger.debug(
        "Logging initialized: Console: %s, File: %s",
        settings.logs_console_level,
        settings.logs_file_level,
    )
