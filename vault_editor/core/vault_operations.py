"""Path guard and the document store every engine reads and writes through."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from datetime import datetime
from pathlib import Path, PurePosixPath
from typing import Any

from vault_editor.constants import NOTE_EXTENSION
from vault_editor.data_models import VaultMetadata

logger = logging.getLogger(__name__)


def ensure_vault_ready(vault: VaultMetadata) -> None:
    """Ensure the target vault directory is accessible before performing operations.

    Raises:
        FileNotFoundError: If the vault path does not exist or is not a directory.
    """
    if not vault.path.is_dir():
        raise FileNotFoundError(f"Vault '{vault.name}' is not accessible at {vault.path}")


def is_path_safe(root: Path | str, candidate: Path | str) -> bool:
    """Return True when ``candidate`` is the vault root or nested beneath it.

    The comparison is purely lexical: ``.`` and ``..`` segments are collapsed with
    :func:`os.path.normpath` and nothing on disk is consulted, so symlinks are not
    followed. Any failure to relate the two paths counts as unsafe.
    """
    try:
        clean_root = os.path.normpath(os.path.abspath(root))
        clean_candidate = os.path.normpath(os.path.abspath(candidate))
        relative = os.path.relpath(clean_candidate, clean_root)
    except (TypeError, ValueError):
        return False

    if relative == os.curdir:
        return True
    first_segment = relative.split(os.sep, 1)[0]
    return first_segment != os.pardir and not os.path.isabs(relative)


def ensure_note_extension(relative: str) -> str:
    """Append ``.md`` to a note path that lacks it (``.MD`` is normalized)."""
    cleaned = relative.strip()
    if cleaned.lower().endswith(NOTE_EXTENSION):
        return cleaned[: -len(NOTE_EXTENSION)] + NOTE_EXTENSION
    return cleaned + NOTE_EXTENSION


def note_name(relative: str) -> str:
    """Return the vault-relative note name without its extension."""
    posix = relative.replace("\\", "/")
    if posix.lower().endswith(NOTE_EXTENSION):
        posix = posix[: -len(NOTE_EXTENSION)]
    return posix


def note_basename(relative: str) -> str:
    """Return the bare file name of a note without folders or extension."""
    return PurePosixPath(note_name(relative)).name


class DocumentStore:
    """Read, write and enumerate notes of one vault by vault-relative path.

    Every path handed in by a caller goes through :meth:`resolve`, which runs the
    path guard before the filesystem is touched. Content is read and written as
    UTF-8 with newline translation disabled so edits stay byte-exact.
    """

    def __init__(self, vault: VaultMetadata) -> None:
        self.vault = vault

    @property
    def root(self) -> Path:
        return self.vault.path

    def resolve(self, relative: str) -> Path:
        """Resolve a vault-relative note path to an absolute path inside the vault.

        Raises:
            ValueError: If the path escapes the vault or lacks the ``.md`` extension.
        """
        if not relative or not relative.strip():
            raise ValueError("path is required")
        if not relative.endswith(NOTE_EXTENSION):
            raise ValueError(f"path must end with {NOTE_EXTENSION}")

        candidate = self.root / relative
        if not is_path_safe(self.root, candidate):
            raise ValueError("path must be within vault")
        return Path(os.path.normpath(candidate))

    def resolve_folder(self, relative: str) -> Path:
        """Resolve a vault-relative folder path, enforcing the same guard."""
        candidate = self.root / relative
        if not is_path_safe(self.root, candidate):
            raise ValueError(f"Folder '{relative}' escapes vault '{self.vault.name}'.")
        return Path(os.path.normpath(candidate))

    def relative(self, path: Path) -> str:
        """Convert an absolute path inside the vault into a POSIX vault-relative path."""
        return Path(os.path.relpath(path, self.root)).as_posix()

    def exists(self, relative: str) -> bool:
        return self.resolve(relative).is_file()

    def read(self, relative: str) -> str:
        """Return the full text of a note.

        Raises:
            FileNotFoundError: If the note does not exist.
            ValueError: If the note is not valid UTF-8.
        """
        path = self.resolve(relative)
        if not path.is_file():
            raise FileNotFoundError(f"Note not found: {relative}")
        try:
            with path.open("r", encoding="utf-8", newline="") as handle:
                return handle.read()
        except UnicodeDecodeError as exc:
            raise ValueError(f"Note '{relative}' is not UTF-8 encoded and cannot be processed.") from exc

    def write(self, relative: str, content: str) -> Path:
        """Write the full text of a note, creating parent folders as needed."""
        path = self.resolve(relative)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(content)
        return path

    def rename(self, old_relative: str, new_relative: str) -> None:
        """Move a note to a new vault-relative path.

        Raises:
            FileNotFoundError: If the source note is missing.
            FileExistsError: If the destination already exists.
        """
        old_path = self.resolve(old_relative)
        new_path = self.resolve(new_relative)
        if not old_path.is_file():
            raise FileNotFoundError(f"Note not found: {old_relative}")
        if new_path.exists():
            raise FileExistsError(f"Destination already exists: {new_relative}")
        new_path.parent.mkdir(parents=True, exist_ok=True)
        old_path.rename(new_path)

    def stat(self, relative: str) -> dict[str, Any]:
        """Return modification time and size for a note."""
        path = self.resolve(relative)
        if not path.is_file():
            raise FileNotFoundError(f"Note not found: {relative}")
        stat = path.stat()
        return {
            "modified": datetime.fromtimestamp(stat.st_mtime).isoformat(),
            "size": stat.st_size,
        }

    def iter_notes(self, subtree: str = "") -> Iterator[str]:
        """Yield vault-relative paths of every note under ``subtree``, sorted."""
        base = self.resolve_folder(subtree) if subtree else self.root
        if not base.is_dir():
            return
        for path in sorted(base.rglob(f"*{NOTE_EXTENSION}")):
            if path.is_file():
                yield self.relative(path)
