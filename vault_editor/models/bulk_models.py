"""Pydantic input models for operations over many notes."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from .base import validate_note_path
from .frontmatter_models import _validate_key, _validate_value


class BulkNotesInput(BaseModel):
    """Common fields for bulk operations."""

    paths: list[str] = Field(min_length=1, description="Vault-relative paths of the target notes.")
    vault: Optional[str] = Field(None, description="Vault name (omit to use active vault).")

    @field_validator('paths')
    @classmethod
    def validate_paths(cls, v: list[str]) -> list[str]:
        return [validate_note_path(item) for item in v]

    @field_validator('vault')
    @classmethod
    def validate_vault(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("Vault name cannot be empty. Omit it to use the active vault.")
        return v.strip() if v else None


class BulkTagInput(BulkNotesInput):
    """Input model for bulk_tag tool.

    Examples:
        >>> BulkTagInput(paths=["a.md"], tag="project", action="add")
    """

    tag: str = Field(min_length=1, description="Tag to add or remove; a leading '#' is ignored.")
    action: Literal["add", "remove"] = Field("add", description="'add' or 'remove'.")

    @field_validator('tag')
    @classmethod
    def validate_tag(cls, v: str) -> str:
        cleaned = v.strip().lstrip("#").strip()
        if not cleaned or any(ch.isspace() for ch in cleaned):
            raise ValueError(f"Tag must be a single word without spaces: '{v}'")
        return cleaned


class BulkSetFrontmatterInput(BulkNotesInput):
    """Input model for bulk_set_frontmatter tool.

    Examples:
        >>> BulkSetFrontmatterInput(paths=["a.md", "b.md"], key="status", value="archived")
    """

    key: str = Field(min_length=1, description="Frontmatter key (stored lower-case).")
    value: str = Field(description="Single-line scalar value.")

    @field_validator('key')
    @classmethod
    def validate_key(cls, v: str) -> str:
        return _validate_key(v)

    @field_validator('value')
    @classmethod
    def validate_value(cls, v: str) -> str:
        return _validate_value(v)
