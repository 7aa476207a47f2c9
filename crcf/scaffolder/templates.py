"""Jinja2 template rendering for component scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``crcf/scaffolder/templates/`` directory and renders the content of every
file a component can have.  Component source templates are selected through
a fixed variant table (typed / prop-typed / bare, each for web and native);
test, index and style files each have a single rendering regardless of
variant.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from crcf.config import ComponentConfig

from .formatter import format_source
from .models import FileRole, PlannedFile, RenderedFile
from .names import to_identifier
from .planner import module_name


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# Variant dispatch
# ---------------------------------------------------------------------------

class TemplateVariant(str, Enum):
    """Closed set of component source templates."""
    REACT = "react"
    REACT_NATIVE = "react_native"
    REACT_PROP_TYPES = "react_prop_types"
    REACT_NATIVE_PROP_TYPES = "react_native_prop_types"
    TYPESCRIPT = "typescript"
    TYPESCRIPT_NATIVE = "typescript_native"


# Variant -> template file
COMPONENT_TEMPLATES: dict[TemplateVariant, str] = {
    TemplateVariant.REACT: "react.js.j2",
    TemplateVariant.REACT_NATIVE: "react_native.js.j2",
    TemplateVariant.REACT_PROP_TYPES: "react_prop_types.js.j2",
    TemplateVariant.REACT_NATIVE_PROP_TYPES: "react_native_prop_types.js.j2",
    TemplateVariant.TYPESCRIPT: "typescript.tsx.j2",
    TemplateVariant.TYPESCRIPT_NATIVE: "typescript_native.tsx.j2",
}

# (typed, prop-typed) -> (web variant, native variant); typed wins over prop-typed.
_VARIANT_TABLE: dict[tuple[bool, bool], tuple[TemplateVariant, TemplateVariant]] = {
    (True, True): (TemplateVariant.TYPESCRIPT, TemplateVariant.TYPESCRIPT_NATIVE),
    (True, False): (TemplateVariant.TYPESCRIPT, TemplateVariant.TYPESCRIPT_NATIVE),
    (False, True): (TemplateVariant.REACT_PROP_TYPES, TemplateVariant.REACT_NATIVE_PROP_TYPES),
    (False, False): (TemplateVariant.REACT, TemplateVariant.REACT_NATIVE),
}

TEST_TEMPLATE = "test.js.j2"
INDEX_TEMPLATE = "index.js.j2"
AGGREGATE_INDEX_TEMPLATE = "aggregate_index.js.j2"


def resolve_variant(config: ComponentConfig) -> TemplateVariant:
    """Pick the component source template for *config*."""
    web, native = _VARIANT_TABLE[(config.typescript, config.with_prop_types)]
    return native if config.native else web


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for component scaffolding.

    The renderer discovers ``.j2`` template files under a configurable
    template directory.  Undefined template variables raise instead of
    rendering as empty strings.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        # Register custom filters
        self.env.filters["identifier"] = to_identifier

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"react.js.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    # -- Component files ---------------------------------------------------

    def render_component(self, name: str, config: ComponentConfig) -> str:
        """Render the component source for *name* (unformatted)."""
        template = COMPONENT_TEMPLATES[resolve_variant(config)]
        return self.render(template, {"name": name})

    def render_test(self, name: str, module: str) -> str:
        return self.render(TEST_TEMPLATE, {"name": name, "module": module})

    def render_index(self, module: str) -> str:
        """Render the single re-export statement of a component's index file."""
        return self.render(INDEX_TEMPLATE, {"module": module})

    def render_file(
        self,
        planned: PlannedFile,
        name: str,
        config: ComponentConfig,
    ) -> RenderedFile:
        """Render the full content of one planned file.

        Output is passed through :func:`format_source` unless the TypeScript
        variant is selected, in which case it is returned exactly as the
        template rendered it.  Style files are always empty.
        """
        if planned.role is FileRole.STYLE:
            return RenderedFile(planned.filename, format_source(""))

        module = module_name(name, config)
        if planned.role is FileRole.COMPONENT_SOURCE:
            content = self.render_component(module, config)
        elif planned.role is FileRole.TEST:
            content = self.render_test(module, module)
        else:
            content = self.render_index(module)

        if config.formats_output:
            content = format_source(content)
        return RenderedFile(planned.filename, content)

    # -- Aggregate index ---------------------------------------------------

    def render_aggregate_index(self, entries: list[str]) -> str:
        """Render a formatted barrel file re-exporting every entry directory."""
        return format_source(self.render(AGGREGATE_INDEX_TEMPLATE, {"entries": entries}))

