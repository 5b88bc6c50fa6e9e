"""Tests for bulk tagging and bulk frontmatter updates."""

import pytest

from vault_editor.core.bulk_operations import (
    add_tag,
    bulk_set_frontmatter,
    bulk_tag,
    remove_tag,
)


def test_add_tag_to_frontmatter_list():
    content, changed = add_tag("---\ntags: [a]\n---\n\nbody", "b")
    assert changed
    assert content == "---\ntags:\n  - a\n  - b\n---\n\nbody"


def test_add_tag_without_frontmatter_goes_inline():
    assert add_tag("body", "#x") == ("body\n\n#x", True)


def test_add_existing_tag_is_skipped():
    assert add_tag("text #Project", "project") == ("text #Project", False)


def test_remove_tag_from_body_and_frontmatter():
    raw = "---\ntags:\n  - a\n  - b\n---\nsee #a and #ab\n"
    content, changed = remove_tag(raw, "a")
    assert changed
    assert content == "---\ntags:\n  - b\n---\nsee  and #ab\n"


def test_remove_tag_inline_only():
    assert remove_tag("x #gone y", "gone") == ("x  y", True)


def test_remove_absent_tag():
    assert remove_tag("plain", "gone") == ("plain", False)


def test_empty_tag_rejected():
    with pytest.raises(ValueError):
        add_tag("body", "#")


def test_bulk_tag_reports_per_note(store, write_note, vault):
    write_note("a.md", "---\ntitle: A\n---\nbody")
    write_note("b.md", "#proj already")
    result = bulk_tag(store, ["a.md", "b.md", "missing.md"], "#proj")

    assert result["updated"] == ["a.md"]
    assert result["unchanged"] == ["b.md"]
    assert result["errors"] == ["missing.md: Note not found: missing.md"]
    assert (vault.path / "a.md").read_text(encoding="utf-8") == "---\ntitle: A\ntags:\n  - proj\n---\nbody"
    assert result["message"].startswith("Tagged #proj on 1 note(s), 1 unchanged")


def test_bulk_tag_remove(store, write_note, vault):
    write_note("a.md", "---\ntags: [proj, x]\n---\nbody #proj\n")
    result = bulk_tag(store, ["a.md"], "proj", action="remove")
    assert result["updated"] == ["a.md"]
    assert (vault.path / "a.md").read_text(encoding="utf-8") == "---\ntags: [x]\n---\nbody \n"


def test_bulk_tag_unknown_action(store):
    with pytest.raises(ValueError, match="action"):
        bulk_tag(store, ["a.md"], "x", action="toggle")


def test_bulk_set_frontmatter(store, write_note, vault):
    write_note("a.md", "body")
    write_note("b.md", "---\nstatus: archived\n---\nbody")
    result = bulk_set_frontmatter(store, ["a", "b.md"], "Status", "archived")

    assert result["updated"] == ["a.md"]
    assert result["unchanged"] == ["b.md"]
    assert result["errors"] == []
    assert (vault.path / "a.md").read_text(encoding="utf-8") == "---\nstatus: archived\n---\n\nbody"


def test_bulk_set_frontmatter_rejects_bad_key(store, write_note):
    write_note("a.md", "body")
    with pytest.raises(ValueError):
        bulk_set_frontmatter(store, ["a.md"], "bad key", "x")
