"""MCP tool definitions for the vault editor.

This module imports all tool submodules to register them with the MCP server.
Each tool module uses the @mcp.tool() decorator to auto-register its tools.
"""

# Import all tool modules to register their @mcp.tool() decorated functions
from vault_editor.tools import vault_tools
from vault_editor.tools import note_tools
from vault_editor.tools import edit_tools
from vault_editor.tools import section_tools
from vault_editor.tools import frontmatter_tools
from vault_editor.tools import link_tools
from vault_editor.tools import bulk_tools

__all__ = [
    "vault_tools",
    "note_tools",
    "edit_tools",
    "section_tools",
    "frontmatter_tools",
    "link_tools",
    "bulk_tools",
]
