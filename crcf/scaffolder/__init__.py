"""crcf scaffolder -- plans, renders and writes component folders.

Quick usage::

    from crcf.config import ComponentConfig
    from crcf.scaffolder import ComponentGenerator, IndexGenerator

    generator = ComponentGenerator(ComponentConfig(no_test=True))
    results = await generator.generate_batch(["Button", "Card"], "src/components")

    index_path = await IndexGenerator().generate("src/components")
"""

from crcf.scaffolder.generator import ComponentGenerator
from crcf.scaffolder.index_gen import IndexGenerator
from crcf.scaffolder.models import ComponentResult, ComponentSpec, FileRole, PlannedFile
from crcf.scaffolder.planner import plan_files
from crcf.scaffolder.templates import TemplateRenderer, TemplateVariant

__all__ = [
    "ComponentGenerator",
    "ComponentResult",
    "ComponentSpec",
    "FileRole",
    "IndexGenerator",
    "PlannedFile",
    "TemplateRenderer",
    "TemplateVariant",
    "plan_files",
]
