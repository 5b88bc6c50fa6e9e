"""End-to-end tests of the MCP tool wrappers against a temporary vault."""

import pytest
from pydantic import ValidationError

from vault_editor import config
from vault_editor.config import install_configuration, single_vault_configuration
from vault_editor.core.errors import BatchEditError
from vault_editor.models import (
    BatchEditNoteInput,
    BulkTagInput,
    EditNoteInput,
    ListVaultsInput,
    NoteInfoInput,
    ReadFrontmatterInput,
    RenameNoteInput,
    ReplaceSectionInput,
    SetFrontmatterInput,
)
from vault_editor.tools import (
    bulk_tools,
    edit_tools,
    frontmatter_tools,
    link_tools,
    note_tools,
    section_tools,
    vault_tools,
)


@pytest.fixture
def vault_dir(tmp_path):
    root = tmp_path / "vault"
    root.mkdir()
    install_configuration(single_vault_configuration(str(root)))
    yield root
    config._CONFIGURATION = None


@pytest.mark.asyncio
async def test_list_vaults(vault_dir):
    result = await vault_tools.list_vaults(ListVaultsInput())
    assert result["default"] == "vault"
    assert result["active"] is None
    assert result["vaults"][0]["exists"] is True


@pytest.mark.asyncio
async def test_edit_note_tool(vault_dir):
    (vault_dir / "a.md").write_text("status: draft\n", encoding="utf-8")
    result = await edit_tools.edit_note(EditNoteInput(path="a", old_text="draft", new_text="final"))
    assert result["message"] == "Replaced 1 occurrence(s) in a.md"
    assert (vault_dir / "a.md").read_text(encoding="utf-8") == "status: final\n"


@pytest.mark.asyncio
async def test_batch_edit_tool_with_json_edits(vault_dir):
    (vault_dir / "a.md").write_text("one two three", encoding="utf-8")
    model = BatchEditNoteInput(
        path="a.md",
        edits='[{"old_text": "one", "new_text": "1"}, {"old_text": "three", "new_text": "3"}]',
    )
    result = await edit_tools.batch_edit_note(model)
    assert result["message"] == "Applied 2 edit(s) to a.md"
    assert (vault_dir / "a.md").read_text(encoding="utf-8") == "1 two 3"


@pytest.mark.asyncio
async def test_batch_edit_tool_rejects_ambiguous_batch(vault_dir):
    (vault_dir / "a.md").write_text("a b a", encoding="utf-8")
    model = BatchEditNoteInput(path="a.md", edits=[{"old_text": "a", "new_text": "x"}])
    with pytest.raises(BatchEditError):
        await edit_tools.batch_edit_note(model)
    assert (vault_dir / "a.md").read_text(encoding="utf-8") == "a b a"


@pytest.mark.asyncio
async def test_section_and_note_info_tools(vault_dir):
    (vault_dir / "a.md").write_text("# Plan\n## Tasks\n- old\n", encoding="utf-8")
    await section_tools.replace_section(ReplaceSectionInput(path="a", heading="## tasks", content="- new"))
    info = await note_tools.note_info(NoteInfoInput(path="a"))
    assert (vault_dir / "a.md").read_text(encoding="utf-8") == "# Plan\n## Tasks\n\n- new\n"
    assert [h["text"] for h in info["headings"]] == ["Plan", "Tasks"]


@pytest.mark.asyncio
async def test_frontmatter_tools(vault_dir):
    (vault_dir / "a.md").write_text("body", encoding="utf-8")
    await frontmatter_tools.set_frontmatter(SetFrontmatterInput(path="a", key="Status", value="done"))
    result = await frontmatter_tools.get_frontmatter(ReadFrontmatterInput(path="a"))
    assert result["frontmatter"] == {"status": "done"}
    assert result["properties"] == {"status": "done"}


@pytest.mark.asyncio
async def test_rename_and_bulk_tag_tools(vault_dir):
    (vault_dir / "old.md").write_text("x", encoding="utf-8")
    (vault_dir / "ref.md").write_text("[[old]]", encoding="utf-8")
    result = await link_tools.rename_note(RenameNoteInput(old_path="old", new_path="new"))
    assert result["links_updated"] == 1
    assert (vault_dir / "ref.md").read_text(encoding="utf-8") == "[[new]]"

    tagged = await bulk_tools.bulk_tag(BulkTagInput(paths=["new", "ref"], tag="done"))
    assert tagged["updated"] == ["new.md", "ref.md"]


@pytest.mark.asyncio
async def test_unknown_vault_is_rejected(vault_dir):
    with pytest.raises(ValueError, match="Unknown vault"):
        await note_tools.note_info(NoteInfoInput(path="a", vault="elsewhere"))


def test_invalid_input_never_reaches_the_vault(vault_dir):
    with pytest.raises(ValidationError):
        EditNoteInput(path="../outside", old_text="a", new_text="b")
