"""FastMCP server initialization and process entry point."""

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from mcp.server.fastmcp import FastMCP

from vault_editor.config import install_configuration, load_vault_configuration, single_vault_configuration
from vault_editor.constants import CONFIG_PATH, LOG_LEVEL

# Initialize logger (stderr, so the stdio transport stays clean)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("vault_editor")

# Tool modules are imported in __init__.py to register all @mcp.tool() decorators


def run_server():
    """Start the MCP server with stdio transport."""
    logger.info("Starting vault editor MCP server")
    mcp.run(transport="stdio")


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Load the vault configuration and serve over stdio.

    A vault directory given on the command line takes precedence over
    ``vaults.yaml``. Configuration problems are the only fatal errors.
    """
    parser = argparse.ArgumentParser(
        prog="vault-editor-mcp",
        description="MCP server for in-place editing of markdown vaults.",
    )
    parser.add_argument(
        "vault_path",
        nargs="?",
        help="Vault directory to serve (default: vaults listed in the YAML config).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=CONFIG_PATH,
        help=f"Path to the vault configuration file (default: {CONFIG_PATH}).",
    )
    args = parser.parse_args(argv)

    try:
        if args.vault_path:
            configuration = single_vault_configuration(args.vault_path)
        else:
            configuration = load_vault_configuration(args.config)
    except (FileNotFoundError, ValueError) as exc:
        logger.error("Cannot start vault editor: %s", exc)
        raise SystemExit(1) from exc

    install_configuration(configuration)

    run_server()
