"""Rename and move MCP tools.

All tools delegate to core operations in vault_editor.core.link_operations.
"""
from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import Context

from vault_editor.server import mcp
from vault_editor.session import resolve_vault
from vault_editor.models import RenameNoteInput, BulkMoveInput
from vault_editor.core import link_operations
from vault_editor.core.vault_operations import DocumentStore


@mcp.tool()
async def rename_note(
    input: RenameNoteInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Rename or move a note and rewrite [[wikilinks]] that point at it.

    Links are matched literally on the old name (with or without a |alias),
    both as the full path and as the bare file name.

    Returns:
        {"vault": str, "old_path": str, "new_path": str, "links_updated": int,
         "updated_notes": list[str], "status": "renamed", "message": str}

    Error Handling:
        - Source note missing → FileNotFoundError
        - Destination exists → FileExistsError
    """
    store = DocumentStore(resolve_vault(input.vault, ctx))
    return link_operations.rename_note(store, input.old_path, input.new_path, input.update_links)


@mcp.tool()
async def bulk_move_notes(
    input: BulkMoveInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Move several notes into one folder, keeping their file names.

    Notes that are missing or would collide are reported under "errors"; the
    remaining notes are still moved.
    """
    store = DocumentStore(resolve_vault(input.vault, ctx))
    return link_operations.bulk_move_notes(store, input.paths, input.destination, input.update_links)
