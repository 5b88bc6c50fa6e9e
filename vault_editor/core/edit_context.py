"""Line-numbered excerpts of an edited region, shown back to the caller."""

from __future__ import annotations

from vault_editor.constants import MAX_CONTEXT_CONTENT_PREVIEW, MAX_CONTEXT_LINE_CHARS


def truncate_line(line: str, max_chars: int = MAX_CONTEXT_LINE_CHARS) -> str:
    """Truncate ``line`` to ``max_chars``, noting the original length when cut."""
    if len(line) <= max_chars:
        return line
    return f"{line[:max_chars]}... [{len(line)} chars total]"


def _content_preview(content_lines: list[str], start_line: int, label: str) -> list[str]:
    rendered = []
    edge = MAX_CONTEXT_CONTENT_PREVIEW

    if len(content_lines) <= edge * 2 + 1:
        for offset, line in enumerate(content_lines):
            marker = f"  ← {label}" if offset == 0 else ""
            rendered.append(f"L{start_line + offset + 1}: {truncate_line(line)}{marker}")
        return rendered

    for offset in range(edge):
        marker = f"  ← {label}" if offset == 0 else ""
        rendered.append(f"L{start_line + offset + 1}: {truncate_line(content_lines[offset])}{marker}")
    rendered.append(f"     [... {len(content_lines) - edge * 2} more lines ...]")
    for offset in range(len(content_lines) - edge, len(content_lines)):
        rendered.append(f"L{start_line + offset + 1}: {truncate_line(content_lines[offset])}")
    return rendered


def render_edit_context(
    all_lines: list[str],
    edit_start: int,
    edit_end: int,
    context_lines: int,
    inserted_lines: list[str] | None = None,
) -> str:
    """Render a line-numbered excerpt around an edited region.

    Args:
        all_lines: Lines of the note after the edit.
        edit_start: 0-based index of the first edited line.
        edit_end: 0-based index just past the edited region.
        context_lines: Number of unchanged lines to show on each side.
        inserted_lines: The lines that were written into the region, if known.
            Long blocks are condensed to their first and last lines.

    Returns:
        The excerpt, one ``L<n>: text`` entry per line, or ``""`` when
        ``context_lines`` is not positive.
    """
    if context_lines <= 0:
        return ""

    rendered = []
    for index in range(max(0, edit_start - context_lines), edit_start):
        rendered.append(f"L{index + 1}: {truncate_line(all_lines[index])}")

    if inserted_lines and edit_end <= edit_start:
        rendered.extend(_content_preview(inserted_lines, edit_start, "INSERTED"))
    elif inserted_lines:
        rendered.extend(_content_preview(inserted_lines, edit_start, "CHANGED"))
    else:
        for index in range(edit_start, min(edit_end, len(all_lines))):
            rendered.append(f"L{index + 1}: {truncate_line(all_lines[index])}")

    for index in range(max(edit_end, 0), min(edit_end + context_lines, len(all_lines))):
        rendered.append(f"L{index + 1}: {truncate_line(all_lines[index])}")

    return "\n".join(rendered) + "\n" if rendered else ""
