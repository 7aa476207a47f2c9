"""crcf -- scaffolds React component folders.

Creates a directory per component holding its source, test, style and
``index`` files, and can aggregate an existing directory of components into a
single barrel ``index.js``.

Quick usage::

    from crcf.config import ComponentConfig
    from crcf.scaffolder import ComponentGenerator

    generator = ComponentGenerator(ComponentConfig(typescript=True))
    results = await generator.generate_batch(["Button", "forms/Input"], "src/components")
"""

__version__ = "0.1.0"
