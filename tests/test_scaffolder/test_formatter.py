"""Tests for the deterministic source formatter (crcf.scaffolder.formatter)."""

from __future__ import annotations

import pytest

from crcf.config import ComponentConfig
from crcf.scaffolder.formatter import format_source
from crcf.scaffolder.templates import TemplateRenderer

pytestmark = pytest.mark.unit


class TestFormatSource:
    def test_empty_stays_empty(self):
        assert format_source("") == ""

    def test_whitespace_only_becomes_empty(self):
        assert format_source("  \n\t\n\n") == ""

    def test_single_trailing_newline(self):
        assert format_source("const a = 1;") == "const a = 1;\n"
        assert format_source("const a = 1;\n\n\n") == "const a = 1;\n"

    def test_strips_trailing_whitespace(self):
        assert format_source("const a = 1;   \nconst b = 2;\t\n") == "const a = 1;\nconst b = 2;\n"

    def test_collapses_blank_lines(self):
        assert format_source("a;\n\n\n\nb;\n") == "a;\n\nb;\n"

    def test_drops_leading_blank_lines(self):
        assert format_source("\n\nimport React from 'react';\n") == "import React from 'react';\n"

    def test_leading_tabs_become_spaces(self):
        assert format_source("{\n\t\treturn 1;\n}\n") == "{\n    return 1;\n}\n"

    def test_crlf_line_endings(self):
        assert format_source("a;\r\nb;\r\n") == "a;\nb;\n"

    @pytest.mark.parametrize(
        "source",
        [
            "",
            "a;",
            "\t\tx;  \r\n\r\n\r\n y;\n",
            "\n\n\n",
            "line\t\n\t\n\tinner \n",
        ],
    )
    def test_idempotent(self, source):
        once = format_source(source)
        assert format_source(once) == once


class TestFormattedComponents:
    @pytest.mark.parametrize(
        "options",
        [
            {},
            {"with_prop_types": True},
            {"native": True},
            {"native": True, "with_prop_types": True},
        ],
    )
    def test_plain_component_formats_stably(self, options):
        renderer = TemplateRenderer()
        raw = renderer.render_component("Button", ComponentConfig(**options))
        once = format_source(raw)
        assert format_source(once) == once
        assert once.endswith(";\n")
