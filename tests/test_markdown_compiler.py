from __future__ import annotations

import pytest

from mdx_renderer.compiler import PLUGINS_ENV_VAR, CompilerOptions, compile_markdown, split_frontmatter
from mdx_renderer.errors import CompileError


def test_compile_markdown_parses_frontmatter_and_body():
    source = """---
title: "Hello, world!"
tags: [intro, demo]
---

# Hi
"""

    frontmatter, markup = compile_markdown(source)

    assert frontmatter == {"title": "Hello, world!", "tags": ["intro", "demo"]}
    assert markup.strip() == "<h1>Hi</h1>"


def test_compile_markdown_without_frontmatter_passes_custom_tags_through():
    frontmatter, markup = compile_markdown("Some *text*.\n\n<Custom name=\"x\" />\n")

    assert frontmatter == {}
    assert "<p>Some <em>text</em>.</p>" in markup
    assert '<Custom name="x" />' in markup


def test_compile_markdown_applies_default_plugins():
    _, markup = compile_markdown("~~gone~~\n")

    assert "<del>gone</del>" in markup


def test_empty_frontmatter_block_yields_empty_mapping():
    frontmatter, body = split_frontmatter("---\n---\nBody\n")

    assert frontmatter == {}
    assert body == "Body\n"


def test_frontmatter_accepts_dots_as_closing_marker():
    frontmatter, body = split_frontmatter("---\ndraft: true\n...\nBody\n")

    assert frontmatter == {"draft": True}
    assert body == "Body\n"


def test_frontmatter_can_be_disabled():
    frontmatter, markup = compile_markdown(
        "---\ntitle: x\n---\n", options=CompilerOptions(frontmatter=False)
    )

    assert frontmatter == {}
    assert "<hr />" in markup


@pytest.mark.parametrize(
    ("source", "message"),
    [
        ("---\ntitle: Missing end\n\n# Body\n", "Unterminated"),
        ("---\ntitle: [unclosed\n---\nBody\n", "Invalid front-matter"),
        ("---\n- just\n- a list\n---\nBody\n", "mapping"),
    ],
    ids=["unterminated", "invalid-yaml", "not-a-mapping"],
)
def test_malformed_frontmatter_raises_compile_error(source: str, message: str):
    with pytest.raises(CompileError, match=message):
        compile_markdown(source)


def test_non_string_source_raises_compile_error():
    with pytest.raises(CompileError):
        compile_markdown(b"# bytes")  # type: ignore[arg-type]


def test_unknown_plugin_raises_compile_error():
    with pytest.raises(CompileError, match="plugins"):
        compile_markdown("text", options=CompilerOptions(plugins=("no_such_plugin",)))


def test_plugins_can_be_configured_from_environment(monkeypatch):
    monkeypatch.setenv(PLUGINS_ENV_VAR, "table, strikethrough ,")

    assert CompilerOptions().plugins == ("table", "strikethrough")


def test_explicit_plugins_override_environment(monkeypatch):
    monkeypatch.setenv(PLUGINS_ENV_VAR, "table")

    assert CompilerOptions(plugins=["strikethrough"]).plugins == ("strikethrough",)


def test_standalone_component_line_is_not_wrapped_in_paragraph():
    _, markup = compile_markdown("# Title\n\n<Custom/>\n")

    assert markup == "<h1>Title</h1>\n<Custom/>\n"


def test_component_block_wraps_markdown_between_blank_lines():
    _, markup = compile_markdown('<Layout title="x">\n\n## subtitle\n\n</Layout>\n')

    assert markup == '<Layout title="x">\n<h2>subtitle</h2>\n</Layout>\n'


def test_component_tag_after_paragraph_text_stays_inline():
    _, markup = compile_markdown("Intro\n<Custom/>\n")

    assert markup == "<p>Intro\n<Custom/></p>\n"


def test_dotted_component_name_opens_a_block():
    _, markup = compile_markdown("<Docs.Note kind='tip' />\n")

    assert markup == "<Docs.Note kind='tip' />\n"
