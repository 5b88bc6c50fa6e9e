"""Vault Editor MCP Server

In-place editing of markdown vaults via Model Context Protocol: uniqueness-checked
find/replace, atomic batch edits, section replacement, frontmatter edits and
rename with wikilink fix-up.
"""

from vault_editor.config import get_vault_configuration, install_configuration
from vault_editor.data_models import VaultMetadata, VaultConfiguration
from vault_editor.session import resolve_vault, set_active_vault, get_active_vault
from vault_editor.server import mcp, run_server, main

# Import tools to register them with the MCP server
from vault_editor import tools  # noqa: F401

__version__ = "0.1.0"
__all__ = [
    "get_vault_configuration",
    "install_configuration",
    "VaultMetadata",
    "VaultConfiguration",
    "resolve_vault",
    "set_active_vault",
    "get_active_vault",
    "mcp",
    "run_server",
    "main",
]
