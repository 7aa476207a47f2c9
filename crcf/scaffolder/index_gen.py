"""Barrel ``index.js`` generation for a directory of components.

Scans a directory, keeps the subdirectories whose names start with a letter
(hidden folders and numbered scratch folders are skipped) and writes a single
``index.js`` re-exporting each of them, so that::

    import { Button, Input } from './components';

works once every component folder has its own index.
"""

from __future__ import annotations

import asyncio
import os
from pathlib import Path

from crcf.errors import (
    IndexExistsError,
    PathNotFoundError,
    UsageError,
    WriteFailureError,
)
from crcf.utils import write_new_file

from .names import to_identifier
from .templates import TemplateRenderer

AGGREGATE_INDEX_FILENAME = "index.js"


class IndexGenerator:
    """Generates the aggregate ``index.js`` for a components directory."""

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    async def collect_entries(self, directory: str | Path) -> list[str]:
        """Return the component folder names of *directory* in listing order.

        Entries are listed sorted by name, then filtered to real directories
        (stat checks run concurrently) whose first character is alphabetic.

        Raises:
            PathNotFoundError: If *directory* does not exist.
            UsageError: If *directory* is not a directory.
        """
        folder = Path(directory)
        try:
            names = sorted(await asyncio.to_thread(os.listdir, folder))
        except FileNotFoundError as exc:
            raise PathNotFoundError(folder) from exc
        except NotADirectoryError as exc:
            raise UsageError(f"You must provide a components folder, got {folder}") from exc

        is_dir = await asyncio.gather(
            *(asyncio.to_thread((folder / name).is_dir) for name in names)
        )
        return [
            name for name, keep in zip(names, is_dir)
            if keep and name[:1].isalpha()
        ]

    async def generate(self, directory: str | Path) -> Path:
        """Write ``index.js`` into *directory* and return its path.

        Raises:
            PathNotFoundError: If *directory* does not exist.
            UsageError: If *directory* is not a directory.
            UsageError: If two folders would be exported under the same name.
            IndexExistsError: If ``index.js`` is already present; it is never
                overwritten.
            WriteFailureError: For any other failure writing the file.
        """
        entries = await self.collect_entries(directory)
        check_unique_exports(entries)
        content = self.renderer.render_aggregate_index(entries)
        index_path = Path(directory) / AGGREGATE_INDEX_FILENAME

        try:
            await asyncio.to_thread(write_new_file, index_path, content)
        except FileExistsError as exc:
            raise IndexExistsError(index_path) from exc
        except OSError as exc:
            raise WriteFailureError(index_path.parent, exc) from exc
        return index_path


def check_unique_exports(entries: list[str]) -> None:
    """Reject folder names that map to the same export identifier.

    ``date-picker`` and ``DatePicker`` both export as ``DatePicker``, which
    would make the barrel file invalid.

    Raises:
        UsageError: Naming the first pair of clashing folders.
    """
    seen: dict[str, str] = {}
    for entry in entries:
        identifier = to_identifier(entry)
        if identifier in seen:
            raise UsageError(
                f"Folders {seen[identifier]!r} and {entry!r} would both be "
                f"exported as {identifier}. Rename one of them"
            )
        seen[identifier] = entry
