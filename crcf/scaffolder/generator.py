"""Main scaffolding orchestrator.

Takes a ``ComponentConfig`` and one or more component arguments and creates a
fresh directory per component holding its index, source, test and style
files.  A directory that already exists is never touched.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Sequence

from crcf.config import ComponentConfig
from crcf.errors import DirectoryExistsError, ScaffoldError, WriteFailureError
from crcf.utils import write_new_file

from .models import ComponentResult, ComponentSpec, RenderedFile
from .planner import plan_files
from .templates import TemplateRenderer


class ComponentGenerator:
    """Creates component directories.

    One generator is built per invocation; its ``ComponentConfig`` applies to
    every component it creates.
    """

    def __init__(
        self,
        config: ComponentConfig | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config or ComponentConfig()
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    def render(self, spec: ComponentSpec) -> list[RenderedFile]:
        """Plan and render every file of *spec* without writing anything."""
        return [
            self.renderer.render_file(planned, spec.name, spec.config)
            for planned in plan_files(spec)
        ]

    async def generate(self, spec: ComponentSpec) -> list[str]:
        """Create the component directory and write all of its files.

        Args:
            spec: The component to create.

        Returns:
            Written filenames in planned order (index file first).

        Raises:
            DirectoryExistsError: If the target directory already exists.
                Nothing is written in that case.
            WriteFailureError: If creating a file failed, including paths or
                content the filesystem cannot encode.  Files written before
                the failure are left in place.
        """
        target = spec.target_directory
        if await asyncio.to_thread(target.exists):
            raise DirectoryExistsError(target)

        try:
            await asyncio.to_thread(target.mkdir, parents=True)
        except FileExistsError as exc:
            raise DirectoryExistsError(target) from exc
        except (OSError, UnicodeError) as exc:
            raise WriteFailureError(target, exc) from exc

        rendered = self.render(spec)
        try:
            await asyncio.gather(
                *(
                    asyncio.to_thread(write_new_file, target / f.filename, f.content)
                    for f in rendered
                )
            )
        except (OSError, UnicodeError) as exc:
            raise WriteFailureError(target, exc) from exc

        return [f.filename for f in rendered]

    async def generate_batch(
        self,
        arguments: Sequence[str],
        root: str | Path = ".",
    ) -> list[ComponentResult]:
        """Create one component per argument, concurrently.

        Every argument is handled independently: a failure is recorded on its
        own ``ComponentResult`` and never stops the others.  Results are
        returned in argument order.
        """
        return list(
            await asyncio.gather(*(self._generate_one(arg, Path(root)) for arg in arguments))
        )

    # -- Internal ----------------------------------------------------------

    async def _generate_one(self, argument: str, root: Path) -> ComponentResult:
        result = ComponentResult(argument=argument)
        try:
            spec = ComponentSpec.from_argument(argument, root, self.config)
            result.name = spec.name
            result.path = spec.target_directory
            result.files = await self.generate(spec)
        except ScaffoldError as exc:
            result.error = exc
        return result
