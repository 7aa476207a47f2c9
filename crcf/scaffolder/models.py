"""Data models for component scaffolding.

``ComponentSpec`` describes one component to create, ``PlannedFile`` one file
the planner decided it needs, ``RenderedFile`` that file's content between
rendering and writing, and ``ComponentResult`` the outcome reported for each
argument of a batch.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from crcf.config import ComponentConfig
from crcf.errors import ScaffoldError, UsageError

from .names import bare_name, parent_prefix, under_root

RESERVED_NAMES = frozenset({"index"})


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class FileRole(str, Enum):
    """What a generated file is for; selects its template."""
    COMPONENT_INDEX = "component_index"
    COMPONENT_SOURCE = "component_source"
    TEST = "test"
    STYLE = "style"


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------

class ComponentSpec(BaseModel):
    """One component to scaffold."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Bare component name")
    target_directory: Path = Field(..., description="Directory the component is created in")
    config: ComponentConfig = Field(default_factory=ComponentConfig)

    @classmethod
    def from_argument(
        cls,
        argument: str,
        root: str | Path,
        config: ComponentConfig,
    ) -> "ComponentSpec":
        """Build a spec from one raw command-line argument.

        The component lands in ``root / <prefix> / <name>`` where the prefix is
        any leading path carried by *argument*.  An absolute prefix is taken
        relative to *root*.

        Raises:
            UsageError: If the argument has no name, uses a reserved name or
                cannot be represented as text (undecodable bytes).
        """
        name = bare_name(argument)
        if not name:
            raise UsageError(
                f"You didn't supply a component name in {argument!r}. "
                'Please try "crcf componentName"'
            )
        if name in RESERVED_NAMES:
            raise UsageError(
                f"You cannot name your component {name}. Please choose a more descriptive name"
            )
        target = under_root(root, parent_prefix(argument)) / name
        try:
            return cls(name=name, target_directory=target, config=config)
        except ValidationError as exc:
            raise UsageError(f"Invalid component name {argument!r}") from exc


class PlannedFile(BaseModel):
    """A file the planner decided a component needs."""

    model_config = ConfigDict(frozen=True)

    filename: str
    role: FileRole


@dataclass(frozen=True)
class RenderedFile:
    """Content of one planned file, ready to be written."""

    filename: str
    content: str


@dataclass
class ComponentResult:
    """Outcome of scaffolding one batch argument."""

    argument: str
    name: str = ""
    path: Path | None = None
    files: list[str] = field(default_factory=list)
    error: ScaffoldError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
