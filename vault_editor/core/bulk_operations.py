"""Operations applied to many notes at once: tagging and frontmatter updates."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from typing import Any

from vault_editor.core.frontmatter_operations import (
    append_to_frontmatter_array,
    remove_from_frontmatter_array,
    set_frontmatter_key,
)
from vault_editor.core.note_parser import extract_tags, frontmatter_end
from vault_editor.core.vault_operations import DocumentStore, ensure_note_extension, ensure_vault_ready

logger = logging.getLogger(__name__)

TAG_ACTIONS = ("add", "remove")


def _clean_tag(tag: str) -> str:
    cleaned = tag.strip().lstrip("#").strip()
    if not cleaned:
        raise ValueError("tag must not be empty")
    return cleaned


def _split_body(content: str) -> tuple[str, str]:
    """Split ``content`` into ``(frontmatter_block, body)``; the block keeps its closing marker."""
    lines = content.split("\n")
    end = frontmatter_end(lines)
    if end is None:
        return "", content
    return "\n".join(lines[: end + 1]), "\n".join(lines[end + 1 :])


def add_tag(content: str, tag: str) -> tuple[str, bool]:
    """Add ``tag`` unless the note already carries it (case-insensitive).

    Notes with a frontmatter block get the tag appended to ``tags``; other notes
    get an inline ``#tag`` appended to the body.
    """
    tag = _clean_tag(tag)
    if any(existing.lower() == tag.lower() for existing in extract_tags(content)):
        return content, False

    block, _ = _split_body(content)
    if block:
        return append_to_frontmatter_array(content, "tags", tag), True
    return f"{content}\n\n#{tag}", True


def remove_tag(content: str, tag: str) -> tuple[str, bool]:
    """Remove inline ``#tag`` tokens from the body and the value from frontmatter ``tags``."""
    tag = _clean_tag(tag)
    pattern = re.compile(r"(?<!\S)#" + re.escape(tag) + r"(?![A-Za-z0-9_\-])", re.IGNORECASE)

    block, body = _split_body(content)
    stripped_body = pattern.sub("", body)
    updated = f"{block}\n{stripped_body}" if block else stripped_body

    updated, removed_from_block = remove_from_frontmatter_array(updated, "tags", tag)
    return updated, removed_from_block or stripped_body != body


def _apply_to_notes(
    store: DocumentStore,
    paths: Sequence[str],
    transform: Callable[[str], tuple[str, bool]],
) -> tuple[list[str], list[str], list[str]]:
    """Run ``transform`` over each note and write the ones it changed.

    Returns:
        ``(updated, unchanged, errors)``; errors are ``"<path>: <reason>"`` lines.
    """
    updated: list[str] = []
    unchanged: list[str] = []
    errors: list[str] = []

    for raw in paths:
        path = ensure_note_extension(raw)
        try:
            content = store.read(path)
            new_content, changed = transform(content)
            if changed and new_content != content:
                store.write(path, new_content)
                updated.append(path)
            else:
                unchanged.append(path)
        except (OSError, ValueError) as exc:
            logger.warning("Skipping note '%s' in vault '%s': %s", path, store.vault.name, exc)
            errors.append(f"{path}: {exc}")

    return updated, unchanged, errors


def _summary(verb: str, updated: list[str], unchanged: list[str], errors: list[str]) -> str:
    message = f"{verb} {len(updated)} note(s)"
    if unchanged:
        message += f", {len(unchanged)} unchanged"
    if errors:
        message += "\nErrors:\n" + "\n".join(f"- {error}" for error in errors)
    return message


def bulk_tag(store: DocumentStore, paths: Sequence[str], tag: str, action: str = "add") -> dict[str, Any]:
    """Add or remove one tag across several notes.

    Raises:
        ValueError: If ``action`` is unknown or ``tag`` is empty.
    """
    if action not in TAG_ACTIONS:
        raise ValueError(f"action must be one of: {', '.join(TAG_ACTIONS)}")
    tag = _clean_tag(tag)
    ensure_vault_ready(store.vault)

    transform = add_tag if action == "add" else remove_tag
    updated, unchanged, errors = _apply_to_notes(store, paths, lambda content: transform(content, tag))

    logger.info(
        "Bulk %s tag '%s' in vault '%s': %d updated, %d unchanged, %d error(s)",
        action,
        tag,
        store.vault.name,
        len(updated),
        len(unchanged),
        len(errors),
    )
    verb = "Tagged" if action == "add" else "Untagged"
    return {
        "vault": store.vault.name,
        "tag": tag,
        "action": action,
        "updated": updated,
        "unchanged": unchanged,
        "errors": errors,
        "status": "completed",
        "message": _summary(f"{verb} #{tag} on", updated, unchanged, errors),
    }


def bulk_set_frontmatter(store: DocumentStore, paths: Sequence[str], key: str, value: str) -> dict[str, Any]:
    """Set one frontmatter key to the same value on several notes."""
    ensure_vault_ready(store.vault)
    # validate once so a bad key fails the call instead of every note
    set_frontmatter_key("", key, value)

    def _transform(content: str) -> tuple[str, bool]:
        new_content = set_frontmatter_key(content, key, value)
        return new_content, new_content != content

    updated, unchanged, errors = _apply_to_notes(store, paths, _transform)

    logger.info(
        "Bulk set frontmatter '%s' in vault '%s': %d updated, %d unchanged, %d error(s)",
        key,
        store.vault.name,
        len(updated),
        len(unchanged),
        len(errors),
    )
    return {
        "vault": store.vault.name,
        "key": key.strip().lower(),
        "value": value.strip(),
        "updated": updated,
        "unchanged": unchanged,
        "errors": errors,
        "status": "completed",
        "message": _summary(f"Set {key.strip().lower()}={value.strip()} on", updated, unchanged, errors),
    }
