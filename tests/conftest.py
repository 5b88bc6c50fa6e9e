"""Shared fixtures: a throw-away vault and its document store."""

import pytest

from vault_editor.core.vault_operations import DocumentStore
from vault_editor.data_models import VaultMetadata


@pytest.fixture
def vault(tmp_path):
    vault_path = tmp_path / "test_vault"
    vault_path.mkdir()
    return VaultMetadata(
        name="test",
        path=vault_path,
        description="test vault",
        exists=True,
    )


@pytest.fixture
def store(vault):
    return DocumentStore(vault)


@pytest.fixture
def write_note(vault):
    """Write a note relative to the vault root and return its absolute path."""

    def _write(relative: str, content: str):
        path = vault.path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content.encode("utf-8"))
        return path

    return _write
