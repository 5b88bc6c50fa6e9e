"""Find-and-replace MCP tools.

This module provides MCP tool wrappers for text edits inside one note:
- Single edit with a uniqueness check
- Atomic batch of independent edits

All tools delegate to core operations in vault_editor.core.edit_operations.
"""
from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import Context

from vault_editor.server import mcp
from vault_editor.session import resolve_vault
from vault_editor.models import EditNoteInput, BatchEditNoteInput
from vault_editor.core import edit_operations
from vault_editor.core.vault_operations import DocumentStore


# ==============================================================================
# TEXT EDITS
# ==============================================================================

@mcp.tool()
async def edit_note(
    input: EditNoteInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Replace exact text in a note.

    old_text must occur exactly once unless replace_all is true. Nothing is
    written when the match is missing or ambiguous.

    Args:
        input (EditNoteInput): Validated input containing:
            - path (str): Note path (.md added when omitted)
            - old_text (str): Exact text to find
            - new_text (str): Replacement text (may be empty)
            - replace_all (bool): Replace every occurrence
            - context_lines (int): Lines of context to render around the edit
            - vault (str, optional): Target vault (omit to use active vault)

    Returns:
        {"vault": str, "note": str, "replacements": int, "status": "edited",
         "message": str, "context": str (only when context_lines > 0)}

    Examples:
        - Use when: Changing a sentence, a value or a checkbox in place
        - Don't use: Rewriting everything under a heading → Use replace_section()
        - Don't use: Several edits in one note → Use batch_edit_note()

    Error Handling:
        - old_text not found → Error naming the note
        - old_text found N times → Error with the count; add context or set replace_all
        - Note not found → FileNotFoundError
    """
    store = DocumentStore(resolve_vault(input.vault, ctx))
    return edit_operations.edit_note(
        store,
        input.path,
        input.old_text,
        input.new_text,
        replace_all=input.replace_all,
        context_lines=input.context_lines,
    )


@mcp.tool()
async def batch_edit_note(
    input: BatchEditNoteInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Apply several independent edits to one note, all or nothing.

    Every old_text is matched against the note as it was before the call; each
    must occur exactly once and no two matches may overlap. If any edit fails,
    the note is left untouched and every failing edit is reported.

    Args:
        input (BatchEditNoteInput): Validated input containing:
            - path (str): Note path
            - edits (list | str): [{"old_text": str, "new_text": str}, ...] or its JSON encoding
            - context_lines (int): Lines of context around the first edit in the file
            - vault (str, optional): Target vault (omit to use active vault)

    Returns:
        {"vault": str, "note": str, "edits_applied": int, "status": "edited", "message": str}

    Error Handling:
        - ValidationError: Empty edit list or malformed JSON
        - Batch edit validation failed → one line per failing edit, or the overlapping pair
        - Note not found → FileNotFoundError
    """
    store = DocumentStore(resolve_vault(input.vault, ctx))
    edits = [edit_operations.EditEntry(edit.old_text, edit.new_text) for edit in input.edits]
    return edit_operations.batch_edit_note(store, input.path, edits, context_lines=input.context_lines)
