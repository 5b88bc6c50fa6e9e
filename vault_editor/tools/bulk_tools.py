"""Bulk MCP tools for tagging and frontmatter updates across notes.

All tools delegate to core operations in vault_editor.core.bulk_operations.
"""
from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import Context

from vault_editor.server import mcp
from vault_editor.session import resolve_vault
from vault_editor.models import BulkTagInput, BulkSetFrontmatterInput
from vault_editor.core import bulk_operations
from vault_editor.core.vault_operations import DocumentStore


@mcp.tool()
async def bulk_tag(
    input: BulkTagInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Add or remove a tag on several notes.

    add: skipped when the note already has the tag; otherwise appended to the
    frontmatter tags list, or as an inline #tag when there is no frontmatter.
    remove: drops inline #tag tokens and the frontmatter entry.

    Returns:
        {"vault": str, "tag": str, "action": str, "updated": list[str],
         "unchanged": list[str], "errors": list[str], "status": "completed", "message": str}
    """
    store = DocumentStore(resolve_vault(input.vault, ctx))
    return bulk_operations.bulk_tag(store, input.paths, input.tag, input.action)


@mcp.tool()
async def bulk_set_frontmatter(
    input: BulkSetFrontmatterInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Set the same frontmatter key and value on several notes."""
    store = DocumentStore(resolve_vault(input.vault, ctx))
    return bulk_operations.bulk_set_frontmatter(store, input.paths, input.key, input.value)
