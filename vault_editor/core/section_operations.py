"""Heading-scoped reading and replacement of note sections."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from vault_editor.core.edit_context import render_edit_context
from vault_editor.core.errors import EditConflictError
from vault_editor.core.note_parser import Heading, parse_headings
from vault_editor.core.vault_operations import DocumentStore, ensure_vault_ready

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SectionBounds:
    """A heading and the exclusive line index where its section stops."""

    heading: Heading
    end: int

    @property
    def body_start(self) -> int:
        return self.heading.line + 1


@dataclass(frozen=True)
class SectionReplacement:
    content: str
    bounds: SectionBounds
    lines_replaced: int
    inserted_lines: list[str]


def find_section(lines: list[str], heading: str) -> Optional[SectionBounds]:
    """Locate the first heading titled ``heading`` (case-insensitive).

    The section runs until the next heading whose level is the same or higher
    (fewer ``#``), or to the end of the note. Deeper headings are part of it.
    """
    wanted = heading.strip().casefold()
    headings = parse_headings(lines)

    for position, candidate in enumerate(headings):
        if candidate.text.casefold() != wanted:
            continue
        end = len(lines)
        for following in headings[position + 1 :]:
            if following.level <= candidate.level:
                end = following.line
                break
        return SectionBounds(heading=candidate, end=end)
    return None


def normalize_section_content(content: str) -> list[str]:
    """Trim trailing newlines and wrap the content in exactly one blank line on each side."""
    return ("\n" + content.rstrip("\n") + "\n").split("\n")


def replace_section_content(content: str, heading: str, new_content: str) -> SectionReplacement:
    """Replace the body of a section in ``content``; the heading line is kept.

    Raises:
        EditConflictError: If no heading matches.
    """
    lines = content.split("\n")
    bounds = find_section(lines, heading)
    if bounds is None:
        raise EditConflictError(f"Heading '{heading}' not found")

    inserted = normalize_section_content(new_content)
    updated = lines[: bounds.body_start] + inserted + lines[bounds.end :]
    return SectionReplacement(
        content="\n".join(updated),
        bounds=bounds,
        lines_replaced=bounds.end - bounds.body_start,
        inserted_lines=inserted,
    )


def replace_section(
    store: DocumentStore,
    path: str,
    heading: str,
    content: str,
    context_lines: int = 0,
) -> dict[str, Any]:
    """Replace everything under a heading up to the next heading of the same or higher level.

    Args:
        store: Document store of the target vault.
        path: Vault-relative note path.
        heading: Heading text to match, without the leading ``#`` characters.
        content: New section body.
        context_lines: When positive, include an excerpt around the new body.

    Raises:
        FileNotFoundError: If the note does not exist.
        EditConflictError: If the heading is not present in the note.
    """
    ensure_vault_ready(store.vault)
    text = store.read(path)

    try:
        replacement = replace_section_content(text, heading, content)
    except EditConflictError as exc:
        logger.info("Heading '%s' not found in note '%s' (vault '%s')", heading, path, store.vault.name)
        raise EditConflictError(f"Heading '{heading}' not found in {path}") from exc

    store.write(path, replacement.content)
    logger.info(
        "Replaced section '%s' in note '%s' (vault '%s'): %d -> %d lines",
        heading,
        path,
        store.vault.name,
        replacement.lines_replaced,
        len(replacement.inserted_lines),
    )

    message = (
        f"Replaced section '{heading}' in {path} "
        f"({replacement.lines_replaced} lines replaced with {len(replacement.inserted_lines)} lines)"
    )
    result: dict[str, Any] = {
        "vault": store.vault.name,
        "note": path,
        "heading": replacement.bounds.heading.text,
        "level": replacement.bounds.heading.level,
        "lines_replaced": replacement.lines_replaced,
        "lines_inserted": len(replacement.inserted_lines),
        "status": "replaced",
    }

    if context_lines > 0:
        start = replacement.bounds.body_start
        context = render_edit_context(
            replacement.content.split("\n"),
            start,
            start + len(replacement.inserted_lines),
            context_lines,
            replacement.inserted_lines,
        )
        result["context"] = context
        message += f"\n\n--- Context ---\n{context}"

    result["message"] = message
    return result


def read_section(store: DocumentStore, path: str, heading: str) -> dict[str, Any]:
    """Return the body of a section exactly as :func:`replace_section` bounds it."""
    ensure_vault_ready(store.vault)
    lines = store.read(path).split("\n")
    bounds = find_section(lines, heading)
    if bounds is None:
        raise EditConflictError(f"Heading '{heading}' not found in {path}")

    body = "\n".join(lines[bounds.body_start : bounds.end])
    return {
        "vault": store.vault.name,
        "note": path,
        "heading": bounds.heading.text,
        "level": bounds.heading.level,
        "line": bounds.heading.line + 1,
        "content": body,
        "status": "read",
        "message": f"Section '{bounds.heading.text}' of {path}:\n\n{body}",
    }
