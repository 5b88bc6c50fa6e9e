"""Exceptions raised when an edit cannot be applied unambiguously."""

from __future__ import annotations


class EditConflictError(ValueError):
    """The requested edit does not match the note the way the caller expects.

    Raised for missing or ambiguous matches, overlapping batch edits and missing
    headings. Subclasses ``ValueError`` so callers that only know about input
    errors still treat it as a rejected request.
    """


class BatchEditError(EditConflictError):
    """A batch failed validation; ``failures`` lists one message per failing edit."""

    def __init__(self, message: str, failures: list[str] | None = None) -> None:
        super().__init__(message)
        self.failures = list(failures or [])
