"""Module-level constants for the vault editor MCP server."""

import os
from pathlib import Path

# Configuration
CONFIG_PATH = Path(os.environ.get("VAULT_EDITOR_CONFIG", Path(__file__).parent.parent / "vaults.yaml"))

# Notes
NOTE_EXTENSION = ".md"
FRONTMATTER_MARKER = "---"

# Context rendering
MAX_CONTEXT_LINE_CHARS = 200
MAX_CONTEXT_CONTENT_PREVIEW = 2  # lines shown from each edge of a large edited block
MAX_EDIT_PREVIEW_CHARS = 80

# Logging
LOG_LEVEL = os.environ.get("VAULT_EDITOR_LOG_LEVEL", "INFO")
