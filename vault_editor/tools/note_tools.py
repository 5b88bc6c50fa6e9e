"""Note inspection MCP tools."""
from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import Context

from vault_editor.server import mcp
from vault_editor.session import resolve_vault
from vault_editor.models import NoteInfoInput
from vault_editor.core import note_operations
from vault_editor.core.vault_operations import DocumentStore


@mcp.tool()
async def note_info(
    input: NoteInfoInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Summarize a note's structure without returning its body.

    Returns the H1 title, tags (frontmatter and inline), outgoing wikilinks,
    headings with line numbers and the scalar frontmatter fields.

    Examples:
        - Use when: Finding the exact heading text before replace_section()
        - Use when: Checking which notes a note links to
    """
    store = DocumentStore(resolve_vault(input.vault, ctx))
    return note_operations.note_info(store, input.path)
