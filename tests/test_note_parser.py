"""Tests for the note model parser."""

import pytest

from vault_editor.core.note_parser import (
    extract_h1_title,
    extract_tags,
    extract_wikilinks,
    frontmatter_list,
    parse_frontmatter,
    parse_headings,
    remove_frontmatter,
)


def test_wikilinks_unique_in_first_seen_order():
    content = "See [[Beta]], [[Alpha|the first]] and [[Beta]] again. [[ ]]"
    assert extract_wikilinks(content) == ["Beta", "Alpha"]


def test_wikilinks_are_case_sensitive():
    assert extract_wikilinks("[[note]] [[Note]]") == ["note", "Note"]


def test_wikilinks_with_folders():
    assert extract_wikilinks("[[Projects/Plan|plan]]") == ["Projects/Plan"]


def test_h1_title_skips_deeper_headings():
    assert extract_h1_title("## Sub\n#NoSpace\n# Title  \nbody") == "Title"


def test_h1_title_missing():
    assert extract_h1_title("no headings here") == ""
    assert extract_h1_title("") == ""


def test_tags_from_inline_list_and_body():
    content = "---\ntags: [a, b]\n---\nText #c and #a, but not url#notag\n"
    assert extract_tags(content) == ["a", "b", "c"]


def test_tags_from_dash_list():
    content = "---\ntitle: X\ntags:\n  - x\n  - \"y\"\n---\n#z\n"
    assert extract_tags(content) == ["x", "y", "z"]


def test_tags_are_case_sensitive():
    assert extract_tags("#Tag #tag") == ["Tag", "tag"]


def test_heading_is_not_a_tag():
    assert extract_tags("# Title\n## Sub\n#real") == ["real"]


def test_frontmatter_keys_lowercased_and_unquoted():
    content = "---\nTitle: \"Hello\"\nstatus:  draft \n---\nbody"
    assert parse_frontmatter(content) == {"title": "Hello", "status": "draft"}


def test_frontmatter_without_block():
    assert parse_frontmatter("title: not frontmatter") == {}


def test_frontmatter_unclosed_block():
    assert parse_frontmatter("---\ntitle: x\nbody") == {}


def test_frontmatter_must_start_at_top():
    assert parse_frontmatter("\n---\ntitle: x\n---\n") == {}


def test_frontmatter_list_forms():
    assert frontmatter_list("---\naliases: [One, 'Two']\n---\n", "aliases") == ["One", "Two"]
    assert frontmatter_list("---\naliases:\n  - One\n---\n", "ALIASES") == ["One"]
    assert frontmatter_list("---\naliases: One\n---\n", "aliases") == ["One"]
    assert frontmatter_list("no block", "aliases") == []


def test_remove_frontmatter_strips_leading_blank_lines():
    assert remove_frontmatter("---\na: 1\n---\n\n\nbody\n") == "body\n"
    assert remove_frontmatter("body") == "body"


def test_parse_headings_levels_and_lines():
    headings = parse_headings(["# Top", "text", "### Deep ##", "####### too deep", "## Mid\r"])
    assert [(h.level, h.text, h.line) for h in headings] == [
        (1, "Top", 0),
        (3, "Deep ##", 2),
        (2, "Mid", 4),
    ]
    assert headings[0].as_payload() == {"level": 1, "text": "Top", "line": 1}


MALFORMED = [
    "",
    "---",
    "---\n",
    "---\ntags: [a\n",
    "---\ntags:\n  - \n---",
    "[[",
    "]] [[ ]]",
    "[[|alias]] [[#heading]]",
    "#",
    "# ",
    "####### too deep",
    "\x00\ufeff#tag",
    "---\n---\n---\n",
    "tags:\n  - a\n---\n# h\n[[x",
]


@pytest.mark.parametrize("content", MALFORMED)
def test_parsers_never_fail(content):
    assert isinstance(extract_wikilinks(content), list)
    assert isinstance(extract_h1_title(content), str)
    assert isinstance(extract_tags(content), list)
    assert isinstance(parse_frontmatter(content), dict)
    assert isinstance(parse_headings(content.split("\n")), list)
    assert isinstance(frontmatter_list(content, "tags"), list)
