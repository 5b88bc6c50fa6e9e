"""Pydantic input models for find-and-replace editing.

This module defines input models for text edits inside one note:
- Single edit with uniqueness check (optionally replace all)
- Atomic batch of independent edits
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, Field, field_validator

from .base import BaseNoteInput

EDITS_SHAPE = '[{"old_text": "...", "new_text": "..."}, ...]'


class EditNoteInput(BaseNoteInput):
    """Input model for edit_note tool.

    Examples:
        >>> EditNoteInput(path="Plan.md", old_text="Status: draft", new_text="Status: final")
    """

    old_text: str = Field(
        min_length=1,
        description=(
            "Exact text to find. Must occur exactly once unless replace_all is true; "
            "include surrounding text to make the match unique."
        )
    )

    new_text: str = Field(
        description="Replacement text. May be empty to delete old_text."
    )

    replace_all: bool = Field(
        False,
        description="Replace every occurrence instead of requiring a unique match."
    )

    context_lines: int = Field(
        0,
        ge=0,
        description="Lines of surrounding context to show around the edit (0 = none)."
    )

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {
                    "path": "Projects/Plan.md",
                    "old_text": "Status: draft",
                    "new_text": "Status: final",
                    "replace_all": False,
                    "context_lines": 2,
                    "vault": None
                }
            ]
        }


class EditEntryInput(BaseModel):
    """One find-and-replace pair inside a batch."""

    old_text: str = Field(description="Exact text to find; must occur exactly once in the note.")
    new_text: str = Field(description="Replacement text.")


class BatchEditNoteInput(BaseNoteInput):
    """Input model for batch_edit_note tool.

    ``edits`` accepts a list of objects or the same list encoded as a JSON
    string. All edits are matched against the note as it was before the call.

    Examples:
        >>> BatchEditNoteInput(path="Plan.md", edits=[{"old_text": "a", "new_text": "b"}])
        >>> BatchEditNoteInput(path="Plan.md", edits='[{"old_text": "a", "new_text": "b"}]')
    """

    edits: list[EditEntryInput] = Field(
        description=(
            "Edits to apply atomically, as a list or JSON string of "
            f"{EDITS_SHAPE}. Each old_text must be unique and edits must not overlap."
        )
    )

    context_lines: int = Field(
        0,
        ge=0,
        description="Lines of surrounding context to show around the first edit (0 = none)."
    )

    @field_validator('edits', mode='before')
    @classmethod
    def decode_edits(cls, v: Any) -> Any:
        """Decode a JSON-encoded edit list."""
        if isinstance(v, (str, bytes)):
            try:
                v = json.loads(v)
            except json.JSONDecodeError as exc:
                raise ValueError(f"edits must be a JSON array of {EDITS_SHAPE}: {exc}") from exc
        if not isinstance(v, list):
            raise ValueError(f"edits must be a JSON array of {EDITS_SHAPE}")
        return v

    @field_validator('edits')
    @classmethod
    def validate_not_empty(cls, v: list[EditEntryInput]) -> list[EditEntryInput]:
        if not v:
            raise ValueError("edits array is empty")
        return v

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {
                    "path": "Projects/Plan.md",
                    "edits": [
                        {"old_text": "Status: draft", "new_text": "Status: final"},
                        {"old_text": "Owner: TBD", "new_text": "Owner: Sam"}
                    ],
                    "context_lines": 0,
                    "vault": None
                }
            ]
        }
