"""Vault-wide wikilink rewriting, rename with link fix-up, and bulk moves."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import PurePosixPath
from typing import Any

from vault_editor.core.vault_operations import (
    DocumentStore,
    ensure_note_extension,
    ensure_vault_ready,
    note_basename,
    note_name,
)

logger = logging.getLogger(__name__)


def update_wikilinks(content: str, old_name: str, new_name: str) -> str:
    """Point ``[[old_name]]`` and ``[[old_name|alias]]`` links at ``new_name``.

    This is a literal substring replacement: aliases are kept, but a target that
    merely starts with ``old_name|`` inside a longer link is rewritten as well.
    """
    if not old_name or old_name == new_name:
        return content
    content = content.replace(f"[[{old_name}]]", f"[[{new_name}]]")
    return content.replace(f"[[{old_name}|", f"[[{new_name}|")


def update_links_in_vault(store: DocumentStore, old_name: str, new_name: str) -> list[str]:
    """Rewrite wikilinks in every note of the vault.

    Only notes whose text actually changed are written. A note that cannot be
    read or written is logged and skipped.

    Returns:
        Vault-relative paths of the notes that were modified.
    """
    updated: list[str] = []
    if old_name == new_name:
        return updated

    for relative in store.iter_notes():
        try:
            content = store.read(relative)
        except (OSError, ValueError) as exc:
            logger.warning("Could not read note '%s' while updating links: %s", relative, exc)
            continue

        rewritten = update_wikilinks(content, old_name, new_name)
        if rewritten == content:
            continue

        try:
            store.write(relative, rewritten)
        except OSError as exc:
            logger.warning("Failed to write updated links to '%s': %s", relative, exc)
            continue
        updated.append(relative)

    return updated


def rename_note(
    store: DocumentStore,
    old_path: str,
    new_path: str,
    update_links: bool = True,
) -> dict[str, Any]:
    """Rename or move a note, then rewrite links that referenced it.

    Links are rewritten for the full vault-relative name (``folder/Note``) and,
    when it differs, for the bare file name (``Note``).

    Raises:
        FileNotFoundError: If the source note does not exist.
        FileExistsError: If a note already exists at ``new_path``.
        ValueError: If either path fails the path guard.
    """
    ensure_vault_ready(store.vault)
    store.rename(old_path, new_path)

    changed: list[str] = []
    if update_links:
        changed.extend(update_links_in_vault(store, note_name(old_path), note_name(new_path)))
        old_base, new_base = note_basename(old_path), note_basename(new_path)
        if old_base != note_name(old_path):
            for relative in update_links_in_vault(store, old_base, new_base):
                if relative not in changed:
                    changed.append(relative)

    logger.info(
        "Renamed note '%s' to '%s' in vault '%s' (%d files with updated links)",
        old_path,
        new_path,
        store.vault.name,
        len(changed),
    )
    return {
        "vault": store.vault.name,
        "old_path": old_path,
        "new_path": new_path,
        "links_updated": len(changed),
        "updated_notes": changed,
        "status": "renamed",
        "message": f"Renamed {old_path} -> {new_path}\nUpdated links in {len(changed)} files",
    }


def bulk_move_notes(
    store: DocumentStore,
    paths: Sequence[str],
    destination: str,
    update_links: bool = True,
) -> dict[str, Any]:
    """Move several notes into ``destination``, keeping their file names.

    Per-note failures are collected and do not stop the remaining moves. Links
    by bare name still resolve after a move, so link text is left alone.
    """
    ensure_vault_ready(store.vault)
    folder = destination.strip().strip("/")
    if folder:
        store.resolve_folder(folder)

    moved: list[dict[str, str]] = []
    errors: list[str] = []
    links_updated = 0

    for raw in paths:
        source = ensure_note_extension(raw)
        target = str(PurePosixPath(folder) / PurePosixPath(source).name) if folder else PurePosixPath(source).name
        try:
            if not store.exists(source):
                errors.append(f"{source}: not found")
                continue
            if store.exists(target):
                errors.append(f"{source}: already exists at destination")
                continue
            store.rename(source, target)
        except (OSError, ValueError) as exc:
            errors.append(f"{source}: {exc}")
            continue

        moved.append({"from": source, "to": target})
        if update_links:
            name = note_basename(source)
            links_updated += len(update_links_in_vault(store, name, name))

    logger.info(
        "Moved %d note(s) to '%s' in vault '%s' (%d error(s))",
        len(moved),
        folder or "/",
        store.vault.name,
        len(errors),
    )

    message = f"Moved {len(moved)} note(s) to {folder or '/'}"
    if errors:
        message += "\nErrors:\n" + "\n".join(f"- {error}" for error in errors)
    return {
        "vault": store.vault.name,
        "destination": folder,
        "moved": moved,
        "errors": errors,
        "links_updated": links_updated,
        "status": "moved",
        "message": message,
    }
