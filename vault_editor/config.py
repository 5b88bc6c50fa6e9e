"""Configuration loading and vault registry."""

import logging
from pathlib import Path
from typing import Optional

import yaml

from vault_editor.constants import CONFIG_PATH
from vault_editor.data_models import VaultMetadata, VaultConfiguration

logger = logging.getLogger(__name__)

_CONFIGURATION: Optional[VaultConfiguration] = None


def _resolve_vault_path(raw_path: str) -> Path:
    resolved_path = Path(raw_path).expanduser()
    try:
        return resolved_path.resolve(strict=False)
    except (OSError, RuntimeError):
        # resolve can raise if underlying filesystem is inaccessible; fall back to expanded path
        return resolved_path.absolute()


def load_vault_configuration(config_path: Path = CONFIG_PATH) -> VaultConfiguration:
    """Load and validate the vault configuration file.

    Args:
        config_path: Path to the YAML configuration file. Defaults to ``vaults.yaml``
        next to the package, or ``$VAULT_EDITOR_CONFIG`` when set.

    Returns:
        A fully populated :class:`VaultConfiguration` containing normalized vault
        metadata and the configured default vault name.

    Raises:
        FileNotFoundError: If the configuration file is missing.
        ValueError: If the file exists but does not provide the expected structure
            (missing default, empty mapping, invalid entries, etc.).
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Vault configuration file not found at {config_path}")

    try:
        raw_config = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Vault configuration at {config_path} is not valid YAML: {exc}") from exc

    if not isinstance(raw_config, dict):
        raise ValueError("Vault configuration must be a mapping with 'default' and 'vaults' keys")

    vaults_section = raw_config.get("vaults")
    if not isinstance(vaults_section, dict) or not vaults_section:
        raise ValueError("Vault configuration must include a non-empty 'vaults' mapping")

    processed: dict[str, VaultMetadata] = {}
    for name, entry in vaults_section.items():
        if not isinstance(entry, dict):
            raise ValueError(f"Vault '{name}' must map to a dictionary of settings")

        raw_path = entry.get("path")
        if not isinstance(raw_path, str) or not raw_path.strip():
            raise ValueError(f"Vault '{name}' is missing a valid 'path' string")

        resolved_path = _resolve_vault_path(raw_path)
        description = str(entry.get("description") or "").strip()

        processed[str(name)] = VaultMetadata(
            name=str(name),
            path=resolved_path,
            description=description,
            exists=resolved_path.is_dir(),
        )

    default_vault = raw_config.get("default")
    if not isinstance(default_vault, str) or default_vault not in processed:
        raise ValueError("Vault configuration must specify a 'default' vault present in the mapping")

    return VaultConfiguration(default_vault=default_vault, vaults=processed)


def single_vault_configuration(vault_path: str) -> VaultConfiguration:
    """Build a one-vault configuration from a directory given on the command line.

    Raises:
        FileNotFoundError: If ``vault_path`` is not an existing directory.
    """
    resolved_path = _resolve_vault_path(vault_path)
    if not resolved_path.is_dir():
        raise FileNotFoundError(f"Vault path does not exist: {vault_path}")

    name = resolved_path.name or "vault"
    metadata = VaultMetadata(
        name=name,
        path=resolved_path,
        description="Vault given on the command line",
        exists=True,
    )
    return VaultConfiguration(default_vault=name, vaults={name: metadata})


def install_configuration(configuration: VaultConfiguration) -> VaultConfiguration:
    """Replace the process-wide configuration (used by the entry point and tests)."""
    global _CONFIGURATION
    _CONFIGURATION = configuration
    logger.info(
        "Vault configuration installed (default=%s, vaults=%s)",
        configuration.default_vault,
        ", ".join(configuration.vaults),
    )
    return configuration


def get_vault_configuration() -> VaultConfiguration:
    """Return the active configuration, loading ``vaults.yaml`` on first use."""
    if _CONFIGURATION is None:
        return install_configuration(load_vault_configuration())
    return _CONFIGURATION
