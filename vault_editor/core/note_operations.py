"""Read-only inspection of a single note's parsed model."""

from __future__ import annotations

import logging
from typing import Any

from vault_editor.core.note_parser import (
    extract_h1_title,
    extract_tags,
    extract_wikilinks,
    parse_frontmatter,
    parse_headings,
)
from vault_editor.core.vault_operations import DocumentStore, ensure_vault_ready, note_name

logger = logging.getLogger(__name__)


def note_info(store: DocumentStore, path: str) -> dict[str, Any]:
    """Summarize a note: title, tags, outgoing links, headings and frontmatter.

    The title falls back to the file name when the note has no H1 heading.
    """
    ensure_vault_ready(store.vault)
    content = store.read(path)
    stat = store.stat(path)

    title = extract_h1_title(content) or note_name(path).rsplit("/", 1)[-1]
    tags = extract_tags(content)
    links = extract_wikilinks(content)
    headings = [heading.as_payload() for heading in parse_headings(content.split("\n"))]
    fields = parse_frontmatter(content)

    logger.debug("Parsed note '%s' in vault '%s'", path, store.vault.name)

    lines = [f"Title: {title}", f"Path: {path}"]
    if tags:
        lines.append("Tags: " + ", ".join(f"#{tag}" for tag in tags))
    if links:
        lines.append("Links: " + ", ".join(f"[[{link}]]" for link in links))
    if headings:
        lines.append("Headings:")
        lines.extend(f"  {'#' * h['level']} {h['text']} (line {h['line']})" for h in headings)

    return {
        "vault": store.vault.name,
        "note": path,
        "title": title,
        "tags": tags,
        "links": links,
        "headings": headings,
        "frontmatter": fields,
        "modified": stat["modified"],
        "size": stat["size"],
        "status": "read",
        "message": "\n".join(lines),
    }
