"""Pydantic input models for MCP tool validation.

Each model is the input schema of one or more tools, with field-level
validation and descriptive error messages raised before any file is touched.

Architecture:
- base: Base models (BaseNoteInput, BaseSectionInput) and path validation
- edit_models: Single and batch find-and-replace edits
- section_models: Heading-based section read/replace
- frontmatter_models: Frontmatter read/set/remove/append
- link_models: Rename and bulk move
- bulk_models: Bulk tagging and bulk frontmatter updates
- note_models: Note inspection
- vault_models: Vault management
"""

from .base import BaseNoteInput, BaseSectionInput, validate_note_path
from .edit_models import EditNoteInput, EditEntryInput, BatchEditNoteInput
from .section_models import ReplaceSectionInput, ReadSectionInput
from .frontmatter_models import (
    ReadFrontmatterInput,
    FrontmatterKeyInput,
    SetFrontmatterInput,
    AppendFrontmatterInput,
)
from .link_models import RenameNoteInput, BulkMoveInput
from .bulk_models import BulkTagInput, BulkSetFrontmatterInput
from .note_models import NoteInfoInput
from .vault_models import ListVaultsInput, SetActiveVaultInput

__all__ = [
    # Base models
    "BaseNoteInput",
    "BaseSectionInput",
    "validate_note_path",
    # Edit models
    "EditNoteInput",
    "EditEntryInput",
    "BatchEditNoteInput",
    # Section models
    "ReplaceSectionInput",
    "ReadSectionInput",
    # Frontmatter models
    "ReadFrontmatterInput",
    "FrontmatterKeyInput",
    "SetFrontmatterInput",
    "AppendFrontmatterInput",
    # Rename/move models
    "RenameNoteInput",
    "BulkMoveInput",
    # Bulk models
    "BulkTagInput",
    "BulkSetFrontmatterInput",
    # Note models
    "NoteInfoInput",
    # Vault models
    "ListVaultsInput",
    "SetActiveVaultInput",
]
