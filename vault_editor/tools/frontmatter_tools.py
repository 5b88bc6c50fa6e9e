"""Frontmatter management MCP tools.

This module provides MCP tool wrappers for frontmatter operations:
- Read frontmatter metadata
- Set a single key
- Remove a single key
- Append to a list-valued key

Edits are line-based, so untouched keys keep their formatting and comments.
All tools delegate to core operations in vault_editor.core.frontmatter_operations.
"""
from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import Context

from vault_editor.server import mcp
from vault_editor.session import resolve_vault
from vault_editor.models import (
    ReadFrontmatterInput,
    FrontmatterKeyInput,
    SetFrontmatterInput,
    AppendFrontmatterInput,
)
from vault_editor.core import frontmatter_operations
from vault_editor.core.vault_operations import DocumentStore


# ==============================================================================
# FRONTMATTER OPERATIONS
# ==============================================================================

@mcp.tool()
async def get_frontmatter(
    input: ReadFrontmatterInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Read frontmatter metadata without returning the markdown body.

    Args:
        input (ReadFrontmatterInput): Validated input containing:
            - path (str): Note path
            - vault (str, optional): Target vault (omit to use active vault)

    Returns:
        {
            "vault": str,
            "note": str,
            "frontmatter": dict,     # flat key -> scalar string view
            "properties": dict,      # YAML view with lists and nested values
            "has_frontmatter": bool,
            "status": "read",
            "message": str,
            "yaml_error": str        # only when the block is not valid YAML
        }

    Error Handling:
        - Note not found → FileNotFoundError
    """
    store = DocumentStore(resolve_vault(input.vault, ctx))
    return frontmatter_operations.read_frontmatter(store, input.path)


@mcp.tool()
async def set_frontmatter(
    input: SetFrontmatterInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Set one frontmatter key, creating the block when the note has none.

    An existing key is rewritten in place; a new key goes just before the
    closing '---'. Setting the same value twice leaves the note unchanged.

    Returns:
        {"vault": str, "note": str, "key": str, "value": str,
         "status": "updated" | "unchanged", "message": str}
    """
    store = DocumentStore(resolve_vault(input.vault, ctx))
    return frontmatter_operations.set_note_frontmatter(store, input.path, input.key, input.value)


@mcp.tool()
async def remove_frontmatter_key(
    input: FrontmatterKeyInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Remove one frontmatter key; an emptied block is removed entirely.

    Returns:
        {"vault": str, "note": str, "key": str, "removed": bool,
         "status": "removed" | "unchanged", "message": str}
    """
    store = DocumentStore(resolve_vault(input.vault, ctx))
    return frontmatter_operations.remove_note_frontmatter_key(store, input.path, input.key)


@mcp.tool()
async def append_frontmatter_value(
    input: AppendFrontmatterInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Append a value to a list-valued key such as tags or aliases.

    An inline [a, b] list is rewritten in dash form. A missing key, or a
    missing frontmatter block, is created.
    """
    store = DocumentStore(resolve_vault(input.vault, ctx))
    return frontmatter_operations.append_note_frontmatter_value(store, input.path, input.key, input.value)
