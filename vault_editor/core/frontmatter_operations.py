"""Line-based frontmatter mutation and the note-level frontmatter operations.

Edits work on the raw lines of the block rather than re-serializing YAML, so
comments, key order and quoting on untouched keys survive byte-for-byte.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any

import frontmatter
import yaml

from vault_editor.constants import FRONTMATTER_MARKER
from vault_editor.core.note_parser import (
    TOP_LEVEL_KEY_PATTERN,
    dash_item_value,
    find_frontmatter_key,
    frontmatter_end,
    key_span_end,
    parse_frontmatter,
    split_inline_list,
)
from vault_editor.core.vault_operations import DocumentStore, ensure_vault_ready

logger = logging.getLogger(__name__)

DEFAULT_LIST_INDENT = "  "


# ==============================================================================
# HELPER FUNCTIONS
# ==============================================================================


def _normalize_key(key: str) -> str:
    cleaned = key.strip().lower()
    if not TOP_LEVEL_KEY_PATTERN.match(f"{cleaned}:"):
        raise ValueError(
            f"Invalid frontmatter key '{key}'. Keys start with a letter or underscore "
            "and contain only letters, digits, '_' or '-'."
        )
    return cleaned


def _check_value(value: str) -> str:
    if "\n" in value or "\r" in value:
        raise ValueError("Frontmatter values must fit on a single line.")
    return value.strip()


def _key_value(line: str) -> str:
    match = TOP_LEVEL_KEY_PATTERN.match(line)
    return match.group(2).strip() if match else ""


def _list_indent(lines: list[str]) -> str:
    for line in lines:
        if line.lstrip().startswith("-"):
            return line[: len(line) - len(line.lstrip())]
    return DEFAULT_LIST_INDENT


def _new_block(body_lines: list[str], content: str) -> str:
    block = "\n".join([FRONTMATTER_MARKER, *body_lines, FRONTMATTER_MARKER])
    return f"{block}\n\n{content}"


def _to_payload(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {str(k): _to_payload(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_payload(item) for item in value]
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


# ==============================================================================
# FRONTMATTER MUTATOR
# ==============================================================================


def set_frontmatter_key(content: str, key: str, value: str) -> str:
    """Set ``key: value`` in the frontmatter block, creating the block if needed.

    An existing key (matched case-insensitively) has its line rewritten in place,
    and any list items under it are dropped. A missing key is inserted just
    before the closing marker.
    """
    key = _normalize_key(key)
    value = _check_value(value)

    lines = content.split("\n")
    end = frontmatter_end(lines)
    if end is None:
        return _new_block([f"{key}: {value}"], content)

    key_index = find_frontmatter_key(lines, end, key)
    if key_index is None:
        lines.insert(end, f"{key}: {value}")
        return "\n".join(lines)

    existing_key = TOP_LEVEL_KEY_PATTERN.match(lines[key_index]).group(1)
    span_end = key_span_end(lines, key_index, end)
    lines[key_index:span_end] = [f"{existing_key}: {value}"]
    return "\n".join(lines)


def remove_frontmatter_key(content: str, key: str) -> tuple[str, bool]:
    """Remove a key (and its list items) from the frontmatter block.

    When the block is left without any content it is removed entirely, together
    with the blank lines that separated it from the body.

    Returns:
        ``(new_content, removed)``.
    """
    lines = content.split("\n")
    end = frontmatter_end(lines)
    if end is None:
        return content, False

    key_index = find_frontmatter_key(lines, end, key)
    if key_index is None:
        return content, False

    span_end = key_span_end(lines, key_index, end)
    del lines[key_index:span_end]
    end -= span_end - key_index

    if all(not line.strip() for line in lines[1:end]):
        body = "\n".join(lines[end + 1 :])
        return body.lstrip("\r\n"), True
    return "\n".join(lines), True


def append_to_frontmatter_array(content: str, key: str, value: str) -> str:
    """Append ``value`` to a list-valued key, writing the list in dash form.

    An inline ``[a, b]`` list (or a bare scalar) is rewritten as an indented
    dash list first. A missing key, or a missing block, is created.
    """
    key = _normalize_key(key)
    value = _check_value(value)

    lines = content.split("\n")
    end = frontmatter_end(lines)
    if end is None:
        return _new_block([f"{key}:", f"{DEFAULT_LIST_INDENT}- {value}"], content)

    key_index = find_frontmatter_key(lines, end, key)
    if key_index is None:
        lines[end:end] = [f"{key}:", f"{DEFAULT_LIST_INDENT}- {value}"]
        return "\n".join(lines)

    existing_key = TOP_LEVEL_KEY_PATTERN.match(lines[key_index]).group(1)
    span_end = key_span_end(lines, key_index, end)
    inline_value = _key_value(lines[key_index])

    if inline_value:
        items = split_inline_list(inline_value)
        items.append(value)
        lines[key_index:span_end] = [f"{existing_key}:"] + [
            f"{DEFAULT_LIST_INDENT}- {item}" for item in items
        ]
        return "\n".join(lines)

    indent = _list_indent(lines[key_index + 1 : span_end])
    lines.insert(span_end, f"{indent}- {value}")
    return "\n".join(lines)


def remove_from_frontmatter_array(content: str, key: str, value: str) -> tuple[str, bool]:
    """Remove ``value`` (case-insensitive) from a list-valued key, keeping its form.

    The key itself is removed once its list is empty.

    Returns:
        ``(new_content, removed)``.
    """
    lines = content.split("\n")
    end = frontmatter_end(lines)
    if end is None:
        return content, False

    key_index = find_frontmatter_key(lines, end, key)
    if key_index is None:
        return content, False

    wanted = value.strip().lower()
    existing_key = TOP_LEVEL_KEY_PATTERN.match(lines[key_index]).group(1)
    span_end = key_span_end(lines, key_index, end)
    inline_value = _key_value(lines[key_index])

    if inline_value:
        items = split_inline_list(inline_value)
        kept = [item for item in items if item.lower() != wanted]
        if len(kept) == len(items):
            return content, False
        if not kept:
            return remove_frontmatter_key(content, key)
        if inline_value.startswith("["):
            lines[key_index] = f"{existing_key}: [{', '.join(kept)}]"
        else:
            lines[key_index] = f"{existing_key}: {', '.join(kept)}"
        return "\n".join(lines), True

    item_lines = lines[key_index + 1 : span_end]
    kept_lines = [
        line for line in item_lines if (dash_item_value(line) or "").lower() != wanted
    ]
    if len(kept_lines) == len(item_lines):
        return content, False
    if not any(dash_item_value(line) for line in kept_lines):
        return remove_frontmatter_key(content, key)
    lines[key_index + 1 : span_end] = kept_lines
    return "\n".join(lines), True


# ==============================================================================
# NOTE-LEVEL OPERATIONS
# ==============================================================================


def read_frontmatter(store: DocumentStore, path: str) -> dict[str, Any]:
    """Read a note's frontmatter without returning its body.

    Returns both the flat scalar view used across the server and a structured
    view parsed as YAML, where lists and nested mappings are resolved.
    """
    ensure_vault_ready(store.vault)
    text = store.read(path)
    fields = parse_frontmatter(text)

    result: dict[str, Any] = {
        "vault": store.vault.name,
        "note": path,
        "frontmatter": fields,
        "has_frontmatter": frontmatter_end(text.split("\n")) is not None,
        "status": "read",
    }

    try:
        post = frontmatter.loads(text)
        result["properties"] = _to_payload(dict(post.metadata or {}))
    except (yaml.YAMLError, ValueError, TypeError) as exc:
        # non-mapping YAML surfaces as ValueError/TypeError from python-frontmatter
        logger.warning("Frontmatter of '%s' in vault '%s' is not valid YAML: %s", path, store.vault.name, exc)
        result["properties"] = {}
        result["yaml_error"] = str(exc)

    if fields:
        lines = [f"{key}: {value}" for key, value in fields.items()]
        result["message"] = f"Frontmatter for {path}:\n\n" + "\n".join(lines)
    else:
        result["message"] = f"No frontmatter found in: {path}"
    return result


def _write_if_changed(store: DocumentStore, path: str, before: str, after: str) -> bool:
    if after == before:
        return False
    store.write(path, after)
    return True


def set_note_frontmatter(store: DocumentStore, path: str, key: str, value: str) -> dict[str, Any]:
    """Set a frontmatter key on one note."""
    ensure_vault_ready(store.vault)
    text = store.read(path)
    updated = set_frontmatter_key(text, key, value)
    changed = _write_if_changed(store, path, text, updated)
    key = _normalize_key(key)

    logger.info(
        "Set frontmatter '%s' on note '%s' in vault '%s' (changed=%s)",
        key,
        path,
        store.vault.name,
        changed,
    )
    return {
        "vault": store.vault.name,
        "note": path,
        "key": key,
        "value": value.strip(),
        "status": "updated" if changed else "unchanged",
        "message": f"Set {key}={value.strip()} in {path}",
    }


def remove_note_frontmatter_key(store: DocumentStore, path: str, key: str) -> dict[str, Any]:
    """Remove a frontmatter key from one note; a no-op if the key is absent."""
    ensure_vault_ready(store.vault)
    text = store.read(path)
    updated, removed = remove_frontmatter_key(text, key)
    _write_if_changed(store, path, text, updated)

    logger.info(
        "Removed frontmatter '%s' from note '%s' in vault '%s' (removed=%s)",
        key,
        path,
        store.vault.name,
        removed,
    )
    return {
        "vault": store.vault.name,
        "note": path,
        "key": key.strip().lower(),
        "removed": removed,
        "status": "removed" if removed else "unchanged",
        "message": (
            f"Removed {key.strip().lower()} from {path}"
            if removed
            else f"Key '{key.strip().lower()}' not found in {path}"
        ),
    }


def append_note_frontmatter_value(store: DocumentStore, path: str, key: str, value: str) -> dict[str, Any]:
    """Append a value to a list-valued frontmatter key on one note."""
    ensure_vault_ready(store.vault)
    text = store.read(path)
    updated = append_to_frontmatter_array(text, key, value)
    store.write(path, updated)
    key = _normalize_key(key)

    logger.info(
        "Appended '%s' to frontmatter list '%s' on note '%s' in vault '%s'",
        value.strip(),
        key,
        path,
        store.vault.name,
    )
    return {
        "vault": store.vault.name,
        "note": path,
        "key": key,
        "value": value.strip(),
        "status": "appended",
        "message": f"Appended {value.strip()} to {key} in {path}",
    }
