"""Pydantic input models for frontmatter operations.

This module defines input models for frontmatter management tools:
- Read frontmatter
- Set a key
- Remove a key
- Append a value to a list-valued key
"""

from __future__ import annotations

import re

from pydantic import Field, field_validator

from .base import BaseNoteInput

_KEY_PATTERN = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_-]*$")


def _validate_key(v: str) -> str:
    cleaned = v.strip()
    if not _KEY_PATTERN.match(cleaned):
        raise ValueError(
            f"Invalid frontmatter key '{v}'. Keys start with a letter or underscore "
            "and contain only letters, digits, '_' or '-'."
        )
    return cleaned.lower()


def _validate_value(v: str) -> str:
    if "\n" in v or "\r" in v:
        raise ValueError("Frontmatter values must fit on a single line.")
    return v.strip()


class ReadFrontmatterInput(BaseNoteInput):
    """Input model for get_frontmatter tool.

    Examples:
        >>> ReadFrontmatterInput(path="Plan.md")
    """


class FrontmatterKeyInput(BaseNoteInput):
    """Input model for remove_frontmatter_key tool."""

    key: str = Field(
        min_length=1,
        description="Frontmatter key (case-insensitive; stored lower-case). Example: 'status'."
    )

    @field_validator('key')
    @classmethod
    def validate_key(cls, v: str) -> str:
        return _validate_key(v)


class SetFrontmatterInput(FrontmatterKeyInput):
    """Input model for set_frontmatter tool.

    Examples:
        >>> SetFrontmatterInput(path="Plan.md", key="status", value="done")
    """

    value: str = Field(description="Single-line scalar value written verbatim after 'key: '.")

    @field_validator('value')
    @classmethod
    def validate_value(cls, v: str) -> str:
        return _validate_value(v)

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {"path": "Projects/Plan.md", "key": "status", "value": "done", "vault": None}
            ]
        }


class AppendFrontmatterInput(FrontmatterKeyInput):
    """Input model for append_frontmatter_value tool.

    Examples:
        >>> AppendFrontmatterInput(path="Plan.md", key="aliases", value="Roadmap")
    """

    value: str = Field(
        min_length=1,
        description="Item appended to the list-valued key (the list is written in dash form)."
    )

    @field_validator('value')
    @classmethod
    def validate_value(cls, v: str) -> str:
        cleaned = _validate_value(v)
        if not cleaned:
            raise ValueError("Value to append cannot be empty.")
        return cleaned
