import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from vault_editor.core.frontmatter_operations import (
    append_note_frontmatter_value,
    append_to_frontmatter_array,
    read_frontmatter,
    remove_frontmatter_key,
    remove_from_frontmatter_array,
    remove_note_frontmatter_key,
    set_frontmatter_key,
    set_note_frontmatter,
)
from vault_editor.core.note_parser import remove_frontmatter
from vault_editor.core.vault_operations import DocumentStore
from vault_editor.data_models import VaultMetadata


class FrontmatterMutatorTests(unittest.TestCase):
    def test_set_inserts_before_closing_marker(self) -> None:
        result = set_frontmatter_key("---\ntitle: A\n---\nbody", "status", "done")
        self.assertEqual(result, "---\ntitle: A\nstatus: done\n---\nbody")

    def test_set_replaces_existing_key_in_place(self) -> None:
        raw = "---\nStatus: draft\n# keep this comment\nowner: sam\n---\n"
        result = set_frontmatter_key(raw, "status", "final")
        self.assertEqual(result, "---\nStatus: final\n# keep this comment\nowner: sam\n---\n")

    def test_set_creates_block_when_missing(self) -> None:
        result = set_frontmatter_key("# Body\n", "status", "done")
        self.assertEqual(result, "---\nstatus: done\n---\n\n# Body\n")

    def test_set_lowercases_new_keys(self) -> None:
        result = set_frontmatter_key("---\n---\n", "Status", "done")
        self.assertEqual(result, "---\nstatus: done\n---\n")

    def test_set_is_idempotent(self) -> None:
        for raw in ("body", "---\na: 1\n---\nbody", "---\nstatus: old\n---\n"):
            once = set_frontmatter_key(raw, "status", "done")
            self.assertEqual(set_frontmatter_key(once, "status", "done"), once)

    def test_set_replaces_list_value(self) -> None:
        raw = "---\ntags:\n  - a\n  - b\ntitle: x\n---\n"
        result = set_frontmatter_key(raw, "tags", "none")
        self.assertEqual(result, "---\ntags: none\ntitle: x\n---\n")

    def test_set_rejects_invalid_key_and_multiline_value(self) -> None:
        with self.assertRaises(ValueError):
            set_frontmatter_key("body", "bad key", "x")
        with self.assertRaises(ValueError):
            set_frontmatter_key("body", "key", "two\nlines")

    def test_remove_key_keeps_other_lines(self) -> None:
        result, removed = remove_frontmatter_key("---\na: 1\nb: 2\n---\nbody", "A")
        self.assertTrue(removed)
        self.assertEqual(result, "---\nb: 2\n---\nbody")

    def test_remove_missing_key_is_noop(self) -> None:
        raw = "---\na: 1\n---\nbody"
        self.assertEqual(remove_frontmatter_key(raw, "zzz"), (raw, False))
        self.assertEqual(remove_frontmatter_key("body", "a"), ("body", False))

    def test_remove_last_key_drops_block(self) -> None:
        raw = "---\na: 1\n---\n\nbody\n"
        result, removed = remove_frontmatter_key(raw, "a")
        self.assertTrue(removed)
        self.assertEqual(result, "body\n")
        self.assertEqual(result, remove_frontmatter(raw))

    def test_remove_then_set_recreates_key(self) -> None:
        raw = "---\na: 1\nb: 2\n---\nbody"
        removed, _ = remove_frontmatter_key(raw, "a")
        self.assertEqual(set_frontmatter_key(removed, "a", "1"), "---\nb: 2\na: 1\n---\nbody")

    def test_remove_key_with_dash_items(self) -> None:
        raw = "---\ntags:\n  - a\n  - b\ntitle: x\n---\n"
        result, removed = remove_frontmatter_key(raw, "tags")
        self.assertTrue(removed)
        self.assertEqual(result, "---\ntitle: x\n---\n")

    def test_append_converts_inline_list(self) -> None:
        result = append_to_frontmatter_array("---\ntags: [a]\n---\n\nbody", "tags", "b")
        self.assertEqual(result, "---\ntags:\n  - a\n  - b\n---\n\nbody")
        self.assertNotIn("[", result)

    def test_append_to_dash_list_keeps_indent(self) -> None:
        result = append_to_frontmatter_array("---\ntags:\n    - a\n---\n", "tags", "b")
        self.assertEqual(result, "---\ntags:\n    - a\n    - b\n---\n")

    def test_append_creates_missing_key(self) -> None:
        result = append_to_frontmatter_array("---\ntitle: x\n---\n", "tags", "a")
        self.assertEqual(result, "---\ntitle: x\ntags:\n  - a\n---\n")

    def test_append_creates_missing_block(self) -> None:
        result = append_to_frontmatter_array("body", "tags", "a")
        self.assertEqual(result, "---\ntags:\n  - a\n---\n\nbody")

    def test_remove_from_inline_list_keeps_form(self) -> None:
        result, removed = remove_from_frontmatter_array("---\ntags: [a, B, c]\n---\n", "tags", "b")
        self.assertTrue(removed)
        self.assertEqual(result, "---\ntags: [a, c]\n---\n")

    def test_remove_last_item_removes_key(self) -> None:
        result, removed = remove_from_frontmatter_array("---\ntitle: x\ntags:\n  - a\n---\n", "tags", "a")
        self.assertTrue(removed)
        self.assertEqual(result, "---\ntitle: x\n---\n")

    def test_remove_missing_item_is_noop(self) -> None:
        raw = "---\ntags:\n  - a\n---\n"
        self.assertEqual(remove_from_frontmatter_array(raw, "tags", "z"), (raw, False))


class FrontmatterNoteTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tmpdir = TemporaryDirectory()
        self.vault_path = Path(self.tmpdir.name).resolve()
        self.vault = VaultMetadata(
            name="test",
            path=self.vault_path,
            description="test vault",
            exists=True,
        )
        self.store = DocumentStore(self.vault)

    def tearDown(self) -> None:
        self.tmpdir.cleanup()

    def _write_note(self, name: str, content: str) -> Path:
        note_path = self.vault_path / name
        note_path.parent.mkdir(parents=True, exist_ok=True)
        note_path.write_text(content, encoding="utf-8")
        return note_path

    def test_read_frontmatter_returns_flat_and_structured_views(self) -> None:
        self._write_note("note.md", "---\ntitle: Example\ntags:\n  - a\n  - b\ncreated: 2024-01-02\n---\nBody")
        result = read_frontmatter(self.store, "note.md")
        self.assertTrue(result["has_frontmatter"])
        self.assertEqual(result["frontmatter"]["title"], "Example")
        self.assertEqual(result["properties"]["tags"], ["a", "b"])
        self.assertEqual(result["properties"]["created"], "2024-01-02")
        self.assertNotIn("yaml_error", result)
        self.assertIn("title: Example", result["message"])

    def test_read_frontmatter_reports_invalid_yaml(self) -> None:
        self._write_note("bad.md", "---\ntitle: [unclosed\n---\nBody")
        result = read_frontmatter(self.store, "bad.md")
        self.assertEqual(result["properties"], {})
        self.assertIn("yaml_error", result)
        self.assertEqual(result["frontmatter"], {"title": "[unclosed"})

    def test_read_frontmatter_without_block(self) -> None:
        self._write_note("plain.md", "Just text")
        result = read_frontmatter(self.store, "plain.md")
        self.assertFalse(result["has_frontmatter"])
        self.assertEqual(result["frontmatter"], {})
        self.assertEqual(result["message"], "No frontmatter found in: plain.md")

    def test_set_note_frontmatter_reports_unchanged(self) -> None:
        note = self._write_note("note.md", "---\nstatus: draft\n---\nBody")
        first = set_note_frontmatter(self.store, "note.md", "status", "done")
        second = set_note_frontmatter(self.store, "note.md", "status", "done")
        self.assertEqual(first["status"], "updated")
        self.assertEqual(second["status"], "unchanged")
        self.assertEqual(note.read_text(encoding="utf-8"), "---\nstatus: done\n---\nBody")

    def test_remove_note_frontmatter_key(self) -> None:
        note = self._write_note("note.md", "---\nstatus: draft\n---\n\nBody")
        result = remove_note_frontmatter_key(self.store, "note.md", "status")
        self.assertTrue(result["removed"])
        self.assertEqual(note.read_text(encoding="utf-8"), "Body")

    def test_append_note_frontmatter_value(self) -> None:
        note = self._write_note("note.md", "---\ntags: [a]\n---\n\nbody")
        result = append_note_frontmatter_value(self.store, "note.md", "tags", "b")
        self.assertEqual(result["status"], "appended")
        self.assertEqual(note.read_text(encoding="utf-8"), "---\ntags:\n  - a\n  - b\n---\n\nbody")

    def test_missing_note_raises(self) -> None:
        with self.assertRaises(FileNotFoundError):
            set_note_frontmatter(self.store, "missing.md", "a", "b")


if __name__ == "__main__":
    unittest.main()
