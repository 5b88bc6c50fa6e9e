"""MCP tools for vault management."""

import logging
from typing import Any
from mcp.server.fastmcp import Context

from vault_editor.server import mcp
from vault_editor.models import ListVaultsInput, SetActiveVaultInput
from vault_editor.config import get_vault_configuration
from vault_editor.session import (
    set_active_vault as set_active_vault_session,
    get_active_vault,
    get_session_key,
)

logger = logging.getLogger(__name__)


@mcp.tool()
async def list_vaults(
    input: ListVaultsInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """List configured vaults and current session state.

    Returns:
        {
            "default": str,    # System default vault name
            "active": str,     # Currently active vault (or None)
            "vaults": [{"name": str, "path": str, "description": str, "exists": bool}]
        }

    Error Handling:
        - Config file missing → Error with expected config path
        - Invalid config format → Error describing expected YAML structure
    """
    configuration = get_vault_configuration()
    active = None
    if ctx is not None:
        try:
            active = get_active_vault(ctx).name
        except ValueError:
            active = None

    payload = configuration.as_payload()
    payload["active"] = active
    return payload


@mcp.tool()
async def set_active_vault(
    input: SetActiveVaultInput,
    ctx: Context,
) -> dict[str, Any]:
    """Set the active vault for this conversation session.

    All subsequent tool calls that omit the vault parameter will use the
    active vault.

    Returns:
        {"vault": str, "path": str, "status": "active"}

    Error Handling:
        - Unknown vault → Error listing available vaults
    """
    metadata = set_active_vault_session(ctx, input.vault)
    logger.info("Active vault for session %s set to '%s'", get_session_key(ctx), metadata.name)
    return {
        "vault": metadata.name,
        "path": str(metadata.path),
        "status": "active",
    }
