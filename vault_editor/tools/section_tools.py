"""Section MCP tools.

All tools delegate to core operations in vault_editor.core.section_operations.
"""
from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import Context

from vault_editor.server import mcp
from vault_editor.session import resolve_vault
from vault_editor.models import ReplaceSectionInput, ReadSectionInput
from vault_editor.core import section_operations
from vault_editor.core.vault_operations import DocumentStore


# ==============================================================================
# HEADING-BASED EDITING
# ==============================================================================

# The section ends at the next heading of the same or higher level, so nested
# subsections are replaced along with the section body.
@mcp.tool()
async def replace_section(
    input: ReplaceSectionInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Replace the content under a heading, keeping the heading line.

    Args:
        input (ReplaceSectionInput): Validated input containing:
            - path (str): Note path
            - heading (str): Heading text (case-insensitive, without # markers)
            - content (str): New section body
            - context_lines (int): Lines of context to render around the new body
            - vault (str, optional): Target vault (omit to use active vault)

    Returns:
        {"vault": str, "note": str, "heading": str, "level": int,
         "lines_replaced": int, "lines_inserted": int, "status": "replaced", "message": str}

    Examples:
        - Use when: Rewriting a whole "Tasks" or "Summary" section
        - Don't use: Changing one line → Use edit_note()

    Error Handling:
        - Heading not found → Error; call note_info() to list headings
        - Note not found → FileNotFoundError
    """
    store = DocumentStore(resolve_vault(input.vault, ctx))
    return section_operations.replace_section(
        store,
        input.path,
        input.heading,
        input.content,
        context_lines=input.context_lines,
    )


@mcp.tool()
async def read_section(
    input: ReadSectionInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Return the content under a heading, bounded the same way replace_section bounds it."""
    store = DocumentStore(resolve_vault(input.vault, ctx))
    return section_operations.read_section(store, input.path, input.heading)
