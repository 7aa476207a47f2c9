"""Decides which files a component gets.

The plan is a pure function of the component name and its
``ComponentConfig``; nothing here touches the filesystem.
"""

from __future__ import annotations

from crcf.config import ComponentConfig

from .models import ComponentSpec, FileRole, PlannedFile
from .names import capitalize


def module_name(name: str, config: ComponentConfig) -> str:
    """Base name of the component's source module as it appears on disk."""
    return capitalize(name) if config.uppercase_files else name


def plan_files(spec: ComponentSpec) -> list[PlannedFile]:
    """Return the ordered list of files for *spec*.

    The order is always: index, component source, test (unless ``no_test``),
    style (unless ``no_style`` or ``native``).  With ``uppercase_files`` every
    filename except the index is capitalised.
    """
    config = spec.config
    ext = config.source_extension
    module = module_name(spec.name, config)

    planned = [
        PlannedFile(filename=config.index_filename, role=FileRole.COMPONENT_INDEX),
        PlannedFile(filename=f"{module}.{ext}", role=FileRole.COMPONENT_SOURCE),
    ]
    if config.includes_test:
        planned.append(PlannedFile(filename=f"{module}.test.{ext}", role=FileRole.TEST))
    if config.includes_style:
        planned.append(
            PlannedFile(filename=f"{module}.{config.style_extension}", role=FileRole.STYLE)
        )
    return planned
