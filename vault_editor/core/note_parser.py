"""Pure parsing of note text: frontmatter, wikilinks, tags, titles and headings.

None of these functions raise on malformed or truncated input; the worst case
is an empty result.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from vault_editor.constants import FRONTMATTER_MARKER

# [[Note Name]] or [[path/to/note|Alias]]
WIKILINK_PATTERN = re.compile(r"\[\[([^\]|]+)(?:\|[^\]]+)?\]\]")
H1_PATTERN = re.compile(r"^#[ \t]+(.+?)[ \t]*$", re.MULTILINE)
HEADING_PATTERN = re.compile(r"^(?P<hashes>#{1,6})[ \t]+(?P<title>.+?)[ \t]*$")
INLINE_TAG_PATTERN = re.compile(r"(?<!\S)#([A-Za-z0-9_\-]+)")
FRONTMATTER_KEY_PATTERN = re.compile(r"^([a-zA-Z_][a-zA-Z0-9_-]*)\s*:\s*(.*)$")
TOP_LEVEL_KEY_PATTERN = re.compile(r"^([a-zA-Z_][a-zA-Z0-9_-]*)[ \t]*:(.*)$")


@dataclass(frozen=True)
class Heading:
    """A markdown heading line and its position within the note."""

    level: int
    text: str
    line: int  # 0-based line index

    def as_payload(self) -> dict[str, object]:
        return {"level": self.level, "text": self.text, "line": self.line + 1}


# ==============================================================================
# FRONTMATTER BLOCK
# ==============================================================================


def is_marker_line(line: str) -> bool:
    """Return True for a frontmatter delimiter line (tolerates CR and trailing spaces)."""
    return line.rstrip() == FRONTMATTER_MARKER


def frontmatter_end(lines: list[str]) -> Optional[int]:
    """Return the index of the closing marker line, or None when there is no block.

    A block only counts when the very first line of the note is a marker.
    """
    if not lines or not is_marker_line(lines[0]):
        return None
    for index in range(1, len(lines)):
        if is_marker_line(lines[index]):
            return index
    return None


def has_frontmatter(content: str) -> bool:
    return frontmatter_end(content.split("\n")) is not None


def remove_frontmatter(content: str) -> str:
    """Return the note body with the frontmatter block and following blank lines removed."""
    lines = content.split("\n")
    end = frontmatter_end(lines)
    if end is None:
        return content
    return "\n".join(lines[end + 1 :]).lstrip("\r\n")


def parse_frontmatter(content: str) -> dict[str, str]:
    """Parse the frontmatter block into a flat ``key -> value`` mapping.

    Keys are lower-cased; values are trimmed and stripped of surrounding quotes.
    Only ``key: value`` lines are understood; dash-list items are ignored.
    """
    lines = content.split("\n")
    end = frontmatter_end(lines)
    if end is None:
        return {}

    fields: dict[str, str] = {}
    for line in lines[1:end]:
        match = FRONTMATTER_KEY_PATTERN.match(line.strip())
        if match:
            fields[match.group(1).lower()] = match.group(2).strip().strip("\"'")
    return fields


def find_frontmatter_key(lines: list[str], end: int, key: str) -> Optional[int]:
    """Return the line index of a top-level ``key:`` inside the block (case-insensitive)."""
    wanted = key.strip().lower()
    for index in range(1, end):
        match = TOP_LEVEL_KEY_PATTERN.match(lines[index])
        if match and match.group(1).lower() == wanted:
            return index
    return None


def key_span_end(lines: list[str], key_index: int, end: int) -> int:
    """Return the index just past the last continuation line belonging to a key.

    Continuation lines are indented lines or dash-list items that follow the key
    line directly; a blank line or the next top-level key ends the span.
    """
    index = key_index + 1
    while index < end:
        line = lines[index]
        if not line.strip():
            break
        if line[0] in (" ", "\t") or line.lstrip().startswith("-"):
            index += 1
            continue
        break
    return index


def split_inline_list(value: str) -> list[str]:
    """Split ``[a, "b", c]`` (or bare ``a, b``) into trimmed, unquoted items."""
    inner = value.strip()
    if inner.startswith("[") and inner.endswith("]"):
        inner = inner[1:-1]
    items = []
    for part in inner.split(","):
        item = part.strip().strip("\"'").strip()
        if item:
            items.append(item)
    return items


def dash_item_value(line: str) -> Optional[str]:
    """Return the value of a ``  - item`` line, or None if it is not one."""
    stripped = line.strip()
    if not stripped.startswith("-"):
        return None
    item = stripped[1:].strip().strip("\"'").strip()
    return item or None


def frontmatter_list(content: str, key: str) -> list[str]:
    """Return the items of a list-valued frontmatter key.

    Supports the inline bracket form (``key: [a, b]``), the indented dash-list
    form, and a bare comma-separated scalar.
    """
    lines = content.split("\n")
    end = frontmatter_end(lines)
    if end is None:
        return []
    key_index = find_frontmatter_key(lines, end, key)
    if key_index is None:
        return []

    match = TOP_LEVEL_KEY_PATTERN.match(lines[key_index])
    value = match.group(2).strip() if match else ""
    if value:
        return split_inline_list(value)

    items = []
    for line in lines[key_index + 1 : key_span_end(lines, key_index, end)]:
        item = dash_item_value(line)
        if item:
            items.append(item)
    return items


# ==============================================================================
# BODY MODEL
# ==============================================================================


def extract_wikilinks(content: str) -> list[str]:
    """Return unique wikilink targets in first-seen order; aliases are dropped."""
    links: list[str] = []
    seen: set[str] = set()
    for match in WIKILINK_PATTERN.finditer(content):
        link = match.group(1).strip()
        if link and link not in seen:
            seen.add(link)
            links.append(link)
    return links


def extract_h1_title(content: str) -> str:
    """Return the text of the first ``# Title`` line, or an empty string."""
    match = H1_PATTERN.search(content)
    if match is None:
        return ""
    return match.group(1).strip()


def extract_tags(content: str) -> list[str]:
    """Return frontmatter ``tags`` followed by inline ``#tags``, de-duplicated in order."""
    tags: list[str] = []
    seen: set[str] = set()

    def _add(tag: str) -> None:
        tag = tag.lstrip("#").strip()
        if tag and tag not in seen:
            seen.add(tag)
            tags.append(tag)

    for tag in frontmatter_list(content, "tags"):
        _add(tag)
    for match in INLINE_TAG_PATTERN.finditer(remove_frontmatter(content)):
        _add(match.group(1))
    return tags


def parse_headings(lines: list[str]) -> list[Heading]:
    """Return every ATX heading in ``lines`` with its level and trimmed text."""
    headings = []
    for index, line in enumerate(lines):
        match = HEADING_PATTERN.match(line.rstrip("\r"))
        if match:
            headings.append(
                Heading(
                    level=len(match.group("hashes")),
                    text=match.group("title").strip(),
                    line=index,
                )
            )
    return headings
