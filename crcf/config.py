"""crcf configuration.

Typed configuration for a scaffolding run.  ``ComponentConfig`` holds the
per-invocation component options resolved from the command line; ``Config``
holds the tool-level settings that may also come from environment variables.
Both are Pydantic v2 models so bad values are rejected at construction time.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

StyleExtension = Literal["css", "less", "sass"]

_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


class ComponentConfig(BaseModel):
    """Options shared by every component created in one invocation.

    Instances are frozen: the same value is handed to the planner, the
    renderer and the generator for every component of a batch.
    """

    model_config = ConfigDict(frozen=True)

    typescript: bool = Field(default=False, description="Typed component and .tsx files")
    native: bool = Field(default=False, description="React Native templates, no style file")
    no_test: bool = Field(default=False, description="Omit the test file")
    no_style: bool = Field(default=False, description="Omit the style file")
    style_extension: StyleExtension = Field(default="css")
    with_prop_types: bool = Field(default=False, description="prop-types component template")
    uppercase_files: bool = Field(
        default=False, description="Capitalise every filename except the index"
    )

    # ------------------------------------------------------------------
    # Derived values (read-only properties)
    # ------------------------------------------------------------------

    @property
    def source_extension(self) -> str:
        """Extension of the component, test and index files."""
        return "tsx" if self.typescript else "js"

    @property
    def index_filename(self) -> str:
        return f"index.{self.source_extension}"

    @property
    def includes_test(self) -> bool:
        return not self.no_test

    @property
    def includes_style(self) -> bool:
        """Native components never get a style file."""
        return not (self.no_style or self.native)

    @property
    def formats_output(self) -> bool:
        """TypeScript output is written exactly as rendered."""
        return not self.typescript

    @classmethod
    def from_flags(
        cls,
        *,
        typescript: bool = False,
        native: bool = False,
        no_test: bool = False,
        no_style: bool = False,
        less: bool = False,
        sass: bool = False,
        with_prop_types: bool = False,
        uppercase_files: bool = False,
        default_style: StyleExtension = "css",
    ) -> "ComponentConfig":
        """Build a config from command-line style flags.

        ``sass`` wins over ``less``; with neither set, *default_style* is used.
        """
        style: StyleExtension = default_style
        if less:
            style = "less"
        if sass:
            style = "sass"
        return cls(
            typescript=typescript,
            native=native,
            no_test=no_test,
            no_style=no_style,
            style_extension=style,
            with_prop_types=with_prop_types,
            uppercase_files=uppercase_files,
        )


class Config(BaseModel):
    """Tool-level settings for the ``crcf`` command."""

    working_dir: Path = Field(default=Path("."))
    default_style_extension: StyleExtension = Field(default="css")
    update_check: bool = Field(default=True, description="Query the package index for updates")
    update_check_timeout: float = Field(default=3.0, gt=0, description="Seconds")
    package_index_url: str = Field(default="https://pypi.org/pypi")

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            CRCF_WORKING_DIR, CRCF_STYLE, CRCF_UPDATE_CHECK,
            CRCF_UPDATE_CHECK_TIMEOUT, CRCF_PACKAGE_INDEX_URL.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("CRCF_WORKING_DIR"):
            kwargs["working_dir"] = Path(os.environ["CRCF_WORKING_DIR"])
        if os.environ.get("CRCF_STYLE"):
            kwargs["default_style_extension"] = os.environ["CRCF_STYLE"].strip().lower()
        if os.environ.get("CRCF_UPDATE_CHECK"):
            flag = os.environ["CRCF_UPDATE_CHECK"].strip().lower()
            kwargs["update_check"] = flag not in _FALSE_VALUES
        if os.environ.get("CRCF_UPDATE_CHECK_TIMEOUT"):
            kwargs["update_check_timeout"] = os.environ["CRCF_UPDATE_CHECK_TIMEOUT"]
        if os.environ.get("CRCF_PACKAGE_INDEX_URL"):
            kwargs["package_index_url"] = os.environ["CRCF_PACKAGE_INDEX_URL"]
        return cls(**kwargs)
