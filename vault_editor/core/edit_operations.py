"""Find-and-replace editing of a single note: one edit, or an atomic batch.

Both engines read the note once, build the complete new text in memory and
write it back with a single call to the document store. A rejected edit never
writes anything.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from vault_editor.constants import MAX_EDIT_PREVIEW_CHARS
from vault_editor.core.edit_context import render_edit_context, truncate_line
from vault_editor.core.errors import BatchEditError, EditConflictError
from vault_editor.core.vault_operations import DocumentStore, ensure_vault_ready

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EditEntry:
    """One find-and-replace pair."""

    old_text: str
    new_text: str


@dataclass(frozen=True)
class LocatedEdit:
    """An edit matched against the original content.

    ``index`` is the 1-based position of the edit in the caller's list and
    ``offset`` the character offset of ``old_text`` in the unmodified note.
    """

    index: int
    old_text: str
    new_text: str
    offset: int

    @property
    def end(self) -> int:
        return self.offset + len(self.old_text)


def _context_at(content: str, offset: int, new_text: str, context_lines: int) -> str:
    """Render context for ``new_text`` written at ``offset`` of ``content``."""
    inserted = new_text.split("\n")
    start_line = content.count("\n", 0, offset)
    return render_edit_context(
        content.split("\n"),
        start_line,
        start_line + len(inserted),
        context_lines,
        inserted,
    )


# ==============================================================================
# SINGLE EDIT
# ==============================================================================


def replace_unique(content: str, old_text: str, new_text: str, replace_all: bool = False) -> tuple[str, int]:
    """Replace ``old_text`` in ``content``, insisting on a unique match.

    Returns:
        ``(new_content, replacements)``.

    Raises:
        ValueError: If ``old_text`` is empty.
        EditConflictError: If ``old_text`` is missing, or occurs more than once
            while ``replace_all`` is off. The message carries the count.
    """
    if not old_text:
        raise ValueError("old_text must not be empty")

    count = content.count(old_text)
    if count == 0:
        raise EditConflictError("old_text not found")
    if count > 1 and not replace_all:
        raise EditConflictError(f"Found {count} occurrences of old_text")

    if replace_all:
        return content.replace(old_text, new_text), count
    return content.replace(old_text, new_text, 1), 1


def edit_note(
    store: DocumentStore,
    path: str,
    old_text: str,
    new_text: str,
    replace_all: bool = False,
    context_lines: int = 0,
) -> dict[str, Any]:
    """Replace text in a note, requiring a unique match unless ``replace_all`` is set.

    Args:
        store: Document store of the target vault.
        path: Vault-relative note path (``.md``).
        old_text: Exact text to find.
        new_text: Replacement text.
        replace_all: Replace every occurrence instead of insisting on one.
        context_lines: When positive, include an excerpt of the edited region.

    Returns:
        A dictionary with the vault, note, replacement count, status and a
        human-readable ``message`` (plus ``context`` when requested).

    Raises:
        FileNotFoundError: If the note does not exist.
        EditConflictError: If ``old_text`` is missing or ambiguous.
    """
    ensure_vault_ready(store.vault)
    content = store.read(path)

    try:
        updated, replaced = replace_unique(content, old_text, new_text, replace_all)
    except EditConflictError as exc:
        logger.info("Rejected edit of note '%s' in vault '%s': %s", path, store.vault.name, exc)
        count = content.count(old_text)
        if count == 0:
            raise EditConflictError(f"old_text not found in {path}") from exc
        raise EditConflictError(
            f"Found {count} occurrences of old_text in {path}. "
            "Use replace_all=true to replace all, or provide more context to match uniquely."
        ) from exc

    first_offset = content.find(old_text)
    store.write(path, updated)
    logger.info(
        "Replaced %d occurrence(s) in note '%s' (vault '%s')",
        replaced,
        path,
        store.vault.name,
    )

    message = f"Replaced {replaced} occurrence(s) in {path}"
    result: dict[str, Any] = {
        "vault": store.vault.name,
        "note": path,
        "replacements": replaced,
        "status": "edited",
    }

    if context_lines > 0:
        context = _context_at(updated, first_offset, new_text, context_lines)
        result["context"] = context
        message += f"\n\n--- Context ---\n{context}"

    result["message"] = message
    return result


# ==============================================================================
# BATCH EDIT
# ==============================================================================


def locate_batch_edits(content: str, edits: Sequence[EditEntry], path: str = "note") -> list[LocatedEdit]:
    """Validate a batch against ``content`` and return the edits in file order.

    Every edit must have a non-empty ``old_text`` occurring exactly once, and
    no two matched ranges may overlap. All per-edit problems are collected
    before failing so the caller sees every bad edit at once.

    Raises:
        BatchEditError: If any edit fails validation or two edits overlap.
    """
    located: list[LocatedEdit] = []
    failures: list[str] = []

    for index, edit in enumerate(edits, start=1):
        if not edit.old_text:
            failures.append(f"edit {index}: old_text is empty")
            continue

        count = content.count(edit.old_text)
        preview = truncate_line(edit.old_text, MAX_EDIT_PREVIEW_CHARS)
        if count == 0:
            failures.append(f"edit {index}: old_text not found: {preview!r}")
        elif count > 1:
            failures.append(f"edit {index}: old_text found {count} times (must be unique): {preview!r}")
        else:
            located.append(
                LocatedEdit(
                    index=index,
                    old_text=edit.old_text,
                    new_text=edit.new_text,
                    offset=content.find(edit.old_text),
                )
            )

    if failures:
        raise BatchEditError(
            f"Batch edit validation failed for {path}:\n- " + "\n- ".join(failures),
            failures,
        )

    located.sort(key=lambda edit: edit.offset)
    for previous, current in zip(located, located[1:]):
        if current.offset < previous.end:
            failure = f"edits {previous.index} and {current.index} overlap"
            raise BatchEditError(f"Batch edit validation failed for {path}: {failure}", [failure])

    return located


def apply_located_edits(content: str, located: Sequence[LocatedEdit]) -> str:
    """Splice validated edits into ``content``, working from the end backwards.

    Offsets were computed against the untouched content; applying the highest
    offset first keeps every lower offset valid.
    """
    result = content
    for edit in sorted(located, key=lambda edit: edit.offset, reverse=True):
        result = result[: edit.offset] + edit.new_text + result[edit.end :]
    return result


def apply_batch_edits(content: str, edits: Sequence[EditEntry], path: str = "note") -> tuple[str, list[LocatedEdit]]:
    """Validate and apply a batch in memory; returns ``(new_content, located_edits)``."""
    located = locate_batch_edits(content, edits, path)
    return apply_located_edits(content, located), located


def batch_edit_note(
    store: DocumentStore,
    path: str,
    edits: Sequence[EditEntry],
    context_lines: int = 0,
) -> dict[str, Any]:
    """Apply several independent find-and-replace edits to one note atomically.

    Either every edit is applied in a single write, or none is and the note on
    disk is left untouched.

    Raises:
        ValueError: If ``edits`` is empty.
        FileNotFoundError: If the note does not exist.
        BatchEditError: If validation fails; the message lists every failing edit.
    """
    if not edits:
        raise ValueError("edits array is empty")

    ensure_vault_ready(store.vault)
    content = store.read(path)

    try:
        updated, located = apply_batch_edits(content, edits, path)
    except BatchEditError as exc:
        logger.info(
            "Rejected batch of %d edit(s) for note '%s' in vault '%s' (%d problem(s))",
            len(edits),
            path,
            store.vault.name,
            len(exc.failures),
        )
        raise

    store.write(path, updated)
    logger.info("Applied %d edit(s) to note '%s' (vault '%s')", len(located), path, store.vault.name)

    message = f"Applied {len(located)} edit(s) to {path}"
    result: dict[str, Any] = {
        "vault": store.vault.name,
        "note": path,
        "edits_applied": len(located),
        "status": "edited",
    }

    if context_lines > 0 and located:
        # every other edit lies after the first one, so its offset is unchanged
        first = located[0]
        context = _context_at(updated, first.offset, first.new_text, context_lines)
        result["context"] = context
        message += f"\n\n--- Context (first edit) ---\n{context}"

    result["message"] = message
    return result
