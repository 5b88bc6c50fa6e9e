"""Pydantic input models for section operations.

This module defines input models for heading-based section operations:
- Replace a section's content
- Read a section's content
"""

from __future__ import annotations

from pydantic import Field

from .base import BaseSectionInput


class ReplaceSectionInput(BaseSectionInput):
    """Input model for replace_section tool.

    Replaces everything under the heading up to the next heading of the same
    or higher level. Deeper subsections are replaced too.

    Examples:
        >>> ReplaceSectionInput(path="Plan.md", heading="Tasks", content="- [ ] ship")
    """

    content: str = Field(
        description=(
            "New section body. Trailing newlines are trimmed and the body is "
            "wrapped in one blank line on each side."
        )
    )

    context_lines: int = Field(
        0,
        ge=0,
        description="Lines of surrounding context to show around the new section (0 = none)."
    )

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {
                    "path": "Projects/Plan.md",
                    "heading": "Tasks",
                    "content": "- [ ] Review code\n- [ ] Write tests",
                    "context_lines": 1,
                    "vault": None
                }
            ]
        }


class ReadSectionInput(BaseSectionInput):
    """Input model for read_section tool.

    Examples:
        >>> ReadSectionInput(path="Plan.md", heading="Tasks")
    """
