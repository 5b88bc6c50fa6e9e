"""Pydantic input models for renaming and moving notes."""

from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .base import validate_note_path


class RenameNoteInput(BaseModel):
    """Input model for rename_note tool.

    Examples:
        >>> RenameNoteInput(old_path="Inbox/Idea.md", new_path="Projects/Idea.md")
    """

    old_path: str = Field(min_length=1, description="Current vault-relative note path.")
    new_path: str = Field(min_length=1, description="New vault-relative note path.")
    update_links: bool = Field(
        True,
        description="Rewrite [[wikilinks]] across the vault to point at the new name."
    )
    vault: Optional[str] = Field(None, description="Vault name (omit to use active vault).")

    @field_validator('old_path', 'new_path')
    @classmethod
    def validate_paths(cls, v: str) -> str:
        return validate_note_path(v)

    @field_validator('vault')
    @classmethod
    def validate_vault(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("Vault name cannot be empty. Omit it to use the active vault.")
        return v.strip() if v else None


class BulkMoveInput(BaseModel):
    """Input model for bulk_move_notes tool.

    Examples:
        >>> BulkMoveInput(paths=["a.md", "b.md"], destination="Archive")
    """

    paths: list[str] = Field(min_length=1, description="Vault-relative paths of the notes to move.")
    destination: str = Field(
        description="Destination folder, relative to the vault root ('' for the root)."
    )
    update_links: bool = Field(True, description="Keep wikilinks pointing at the moved notes.")
    vault: Optional[str] = Field(None, description="Vault name (omit to use active vault).")

    @field_validator('paths')
    @classmethod
    def validate_paths(cls, v: list[str]) -> list[str]:
        return [validate_note_path(item) for item in v]

    @field_validator('destination')
    @classmethod
    def validate_destination(cls, v: str) -> str:
        cleaned = v.strip().strip("/")
        if any(part in {".", ".."} for part in re.split(r"[\\/]", cleaned) if part):
            raise ValueError(f"Destination cannot contain '.' or '..' segments: '{v}'")
        if re.match(r"^[A-Za-z]:", cleaned):
            raise ValueError(f"Destination must be relative to the vault: '{v}'")
        return cleaned

    @field_validator('vault')
    @classmethod
    def validate_vault(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("Vault name cannot be empty. Omit it to use the active vault.")
        return v.strip() if v else None
