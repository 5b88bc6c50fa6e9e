"""Pydantic input models for note inspection."""

from __future__ import annotations

from .base import BaseNoteInput


class NoteInfoInput(BaseNoteInput):
    """Input model for note_info tool.

    Examples:
        >>> NoteInfoInput(path="Projects/Plan.md")
    """
