"""Tests for configuration loading, session vault resolution and startup."""

import pytest

from vault_editor import config
from vault_editor.config import (
    install_configuration,
    load_vault_configuration,
    single_vault_configuration,
)
from vault_editor.server import main
from vault_editor.session import resolve_vault


@pytest.fixture(autouse=True)
def reset_configuration():
    yield
    config._CONFIGURATION = None


def _write_config(tmp_path, text):
    path = tmp_path / "vaults.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_configuration(tmp_path):
    (tmp_path / "notes").mkdir()
    path = _write_config(
        tmp_path,
        f"default: personal\nvaults:\n  personal:\n    path: {tmp_path / 'notes'}\n    description: Mine\n"
        f"  work:\n    path: {tmp_path / 'missing'}\n",
    )
    configuration = load_vault_configuration(path)

    assert configuration.default_vault == "personal"
    assert configuration.get("personal").exists
    assert configuration.get("personal").description == "Mine"
    assert not configuration.get("work").exists


def test_missing_configuration_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_vault_configuration(tmp_path / "nope.yaml")


@pytest.mark.parametrize(
    "text",
    [
        "just a string",
        "default: a\n",
        "default: b\nvaults:\n  a:\n    path: /tmp\n",
        "default: a\nvaults:\n  a: /tmp\n",
        "default: a\nvaults:\n  a:\n    description: no path\n",
        "vaults: [unclosed\n",
    ],
)
def test_invalid_configuration(tmp_path, text):
    with pytest.raises(ValueError):
        load_vault_configuration(_write_config(tmp_path, text))


def test_unknown_vault_lists_available(tmp_path):
    configuration = single_vault_configuration(str(tmp_path))
    with pytest.raises(ValueError, match="available"):
        configuration.get("other")


def test_single_vault_configuration(tmp_path):
    configuration = single_vault_configuration(str(tmp_path))
    assert configuration.default_vault == tmp_path.resolve().name
    assert configuration.get(tmp_path.resolve().name).path == tmp_path.resolve()


def test_single_vault_configuration_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        single_vault_configuration(str(tmp_path / "missing"))


def test_resolve_vault_uses_default_and_explicit_name(tmp_path):
    configuration = install_configuration(single_vault_configuration(str(tmp_path)))
    assert resolve_vault(None).name == configuration.default_vault
    assert resolve_vault(configuration.default_vault).path == tmp_path.resolve()
    with pytest.raises(ValueError):
        resolve_vault("unknown")


def test_main_exits_on_bad_vault_path(tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        main([str(tmp_path / "missing")])
    assert exc_info.value.code == 1


def test_main_exits_on_bad_config_file(tmp_path):
    path = _write_config(tmp_path, "default: a\n")
    with pytest.raises(SystemExit) as exc_info:
        main(["--config", str(path)])
    assert exc_info.value.code == 1
