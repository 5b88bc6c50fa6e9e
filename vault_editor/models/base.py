"""Base Pydantic models for MCP tool input validation.

This module defines base models that provide common validation patterns
for note and section operations. Other input models inherit from these bases.

Base Models:
- BaseNoteInput: Common validation for note-related operations
- BaseSectionInput: Adds heading validation for section-based operations
"""

from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel, Field, field_validator

_DRIVE_PATTERN = re.compile(r"^[A-Za-z]:")


def validate_note_path(value: str, field_name: str = "path") -> str:
    """Validate a vault-relative note path and normalize its ``.md`` suffix.

    Enforces:
    - Non-empty path
    - No path traversal attempts (.., .)
    - Relative path only (no absolute paths or drive letters)
    - ``.md`` appended when missing; ``.MD`` normalized to ``.md``

    Raises:
        ValueError: If the path is empty, absolute or contains dot segments.
    """
    cleaned = value.strip()

    if not cleaned:
        raise ValueError(
            f"Note {field_name} cannot be empty. "
            "Provide a vault-relative path like 'Projects/Plan.md'."
        )

    parts = re.split(r"[\\/]", cleaned)
    if any(part in {".", ".."} for part in parts):
        raise ValueError(
            f"Note {field_name} cannot contain '.' or '..' path segments. "
            f"Invalid {field_name}: '{cleaned}'"
        )

    if cleaned.startswith(("/", "\\")) or _DRIVE_PATTERN.match(cleaned):
        raise ValueError(
            f"Note {field_name} must be a relative path within the vault. "
            f"Invalid {field_name}: '{cleaned}'"
        )

    if cleaned.lower().endswith(".md"):
        cleaned = cleaned[:-3]
    if not cleaned or cleaned.endswith(("/", "\\")):
        raise ValueError(f"Note {field_name} must name a file, not just '.md' or a folder.")

    return cleaned + ".md"


class BaseNoteInput(BaseModel):
    """Base model for note operations with common validation.

    Provides standard validation for note paths and vault names.
    All note-related input models should inherit from this class.
    """

    path: str = Field(
        min_length=1,
        description=(
            "Vault-relative note path. The .md extension is added when omitted. "
            "Examples: 'Daily Notes/2025-10-27.md', 'Projects/New Project'. "
            "Forward slashes for folders, case-sensitive."
        ),
        examples=["Daily Notes/2025-10-27.md", "Projects/Plan", "README.md"]
    )

    vault: Optional[str] = Field(
        None,
        description=(
            "Vault name (omit to use active vault). "
            "Use list_vaults() to discover available vaults."
        )
    )

    @field_validator('path')
    @classmethod
    def validate_path(cls, v: str) -> str:
        return validate_note_path(v)

    @field_validator('vault')
    @classmethod
    def validate_vault(cls, v: Optional[str]) -> Optional[str]:
        """Validate vault name format.

        Raises:
            ValueError: If vault name is empty string
        """
        if v is not None and not v.strip():
            raise ValueError(
                "Vault name cannot be empty. "
                "Either omit the vault parameter to use the active vault, "
                "or provide a valid vault name from list_vaults()."
            )

        return v.strip() if v else None


class BaseSectionInput(BaseNoteInput):
    """Base model for section operations.

    Extends BaseNoteInput with heading validation for heading-based operations.
    """

    heading: str = Field(
        min_length=1,
        description=(
            "Heading text to match (case-insensitive, without # markers). "
            "Examples: 'Tasks', 'Meeting Notes', 'Summary'. "
            "Matches first occurrence at any level."
        ),
        examples=["Tasks", "Meeting Notes", "Daily Summary"]
    )

    @field_validator('heading')
    @classmethod
    def validate_heading(cls, v: str) -> str:
        """Strip whitespace and leading # markers; reject empty headings."""
        cleaned = v.strip()

        # Users are supposed to provide heading without #, but we'll be forgiving
        while cleaned.startswith("#"):
            cleaned = cleaned[1:].strip()

        if not cleaned:
            raise ValueError(
                "Heading cannot be empty or just '#' markers. "
                "Provide the actual heading text (e.g., 'Tasks', 'Summary')."
            )

        return cleaned
