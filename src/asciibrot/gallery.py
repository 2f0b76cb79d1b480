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

"""Append-only gallery file of rendered frames.

The gallery is a plain text file. It starts with a banner and each saved
frame is appended as an entry::

    --------------------------------------------------------------------------------
    Generated: 2025-01-31 12:00:00
    Name: Cosmic Vortex
    Description: emerging from chaos
    Type: Full Mandelbrot Set

    <frame>

Entries are never rewritten; the file is only ever opened for appending.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

BANNER = "MANDELBROT ASCII ART GALLERY\n" + "=" * 80 + "\n\n"
ENTRY_SEPARATOR = "\n" + "-" * 80 + "\n"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

ADJECTIVES = (
    "Mystical",
    "Ethereal",
    "Cosmic",
    "Infinite",
    "Swirling",
    "Fractal",
    "Chaotic",
    "Beautiful",
    "Complex",
    "Mathematical",
)
NOUNS = (
    "Spiral",
    "Vortex",
    "Pattern",
    "Dream",
    "Universe",
    "Landscape",
    "Vision",
    "Gateway",
    "Portal",
    "Dimension",
)
DESCRIPTORS = (
    "dancing through infinite complexity",
    "revealing hidden mathematical beauty",
    "emerging from chaos",
    "spiraling into eternity",
    "whispering secrets of infinity",
    "mapping the edge of existence",
    "painting mathematics with ASCII",
    "bridging reality and abstraction",
    "showing the art within algorithms",
    "exploring the fractal frontier",
)


@dataclass(frozen=True)
class ArtMetadata:
    name: str
    description: str


def generate_art_metadata(rng: Optional[random.Random] = None) -> ArtMetadata:
    """Pick a decorative name and description for a gallery entry."""
    if rng is None:
        rng = random.Random()
    name = f"{rng.choice(ADJECTIVES)} {rng.choice(NOUNS)}"
    return ArtMetadata(name=name, description=rng.choice(DESCRIPTORS))


def format_entry(
    content: str, title: str, metadata: ArtMetadata, timestamp: datetime
) -> str:
    return (
        ENTRY_SEPARATOR
        + f"Generated: {timestamp.strftime(TIMESTAMP_FORMAT)}\n"
        + f"Name: {metadata.name}\n"
        + f"Description: {metadata.description}\n"
        + f"Type: {title}\n\n"
        + content
        + "\n\n"
    )


class Gallery:
    """A gallery file on disk."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"Gallery({str(self.path)!r})"

    def append(
        self,
        content: str,
        title: str,
        *,
        now: Optional[datetime] = None,
        rng: Optional[random.Random] = None,
    ) -> ArtMetadata:
        """Append a frame to the gallery, creating the file if needed.

        Args:
            content: The rendered frame, header included.
            title: Short description of the view, recorded as the entry type.
            now: Timestamp for the entry. Defaults to the current local time.
            rng: Source for the decorative name and description.

        Returns:
            The metadata written with the entry.

        Raises:
            OSError: if the file cannot be created or written.
        """
        metadata = generate_art_metadata(rng)
        entry = format_entry(content, title, metadata, now or datetime.now())
        # "x" fails if another writer created the file first; fall through to
        # a plain append in that case.
        try:
            with self.path.open("x", encoding="utf-8") as gallery_file:
                gallery_file.write(BANNER)
                gallery_file.write(entry)
            logger.info("Created gallery %s", self.path)
        except FileExistsError:
            with self.path.open("a", encoding="utf-8") as gallery_file:
                gallery_file.write(entry)
        logger.debug("Saved %r to %s as %r", title, self.path, metadata.name)
        return metadata

    def read(self) -> str:
        """Return the whole gallery.

        Raises:
            FileNotFoundError: if nothing has been saved yet.
        """
        return self.path.read_text(encoding="utf-8")
