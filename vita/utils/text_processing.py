"""
Text processing utilities for cleaning extracted template values.

Every scalar, list item and table cell pulled out of a profile template goes
through clean_value() before it reaches a record.
"""

import re

# Annotation spans may cover several lines (instructions above a field)
ANNOTATION_SPAN = re.compile(r"<!--.*?-->", re.DOTALL)
ANNOTATION_OPEN = "<!--"

# A newline plus any whitespace hugging it
_EMBEDDED_NEWLINE = re.compile(r"[ \t]*\n\s*")


def normalize_line_endings(text: str) -> str:
    """Convert Windows and old-Mac line endings to \\n."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def strip_annotations(text: str) -> str:
    """
    Remove every complete <!-- ... --> span from text.

    Example:
        >>> strip_annotations("VP <!-- your title -->")
        'VP '
    """
    return ANNOTATION_SPAN.sub("", text)


def clean_value(text: str) -> str:
    """
    Normalize a raw extracted value.

    Strips annotation spans, trims surrounding whitespace and collapses
    embedded newlines (with the whitespace around them) to single spaces.
    Content is never reordered or dropped.

    Args:
        text: Raw text sliced out of the template

    Returns:
        Cleaned single-line value (possibly empty)

    Example:
        >>> clean_value("  Builds teams\\n  that ship. <!-- 1-2 lines -->\\n")
        'Builds teams that ship.'
    """
    text = strip_annotations(text)
    text = text.strip()
    return _EMBEDDED_NEWLINE.sub(" ", text)


def is_placeholder(value: str) -> bool:
    """
    Check whether a cleaned value is still annotation text.

    Cleaning removes complete spans, so anything still holding an opening
    marker is an unterminated annotation and must be treated as unset.
    """
    return ANNOTATION_OPEN in value


def usable_value(text: str) -> str:
    """Clean text and return it, or "" when it is empty or placeholder."""
    value = clean_value(text)
    if is_placeholder(value):
        return ""
    return value


def normalize_header_key(header: str) -> str:
    """
    Turn a table header cell into a record key.

    Example:
        >>> normalize_header_key("Organization Type")
        'organization_type'
    """
    return re.sub(r"\s+", "_", header.strip().lower())


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Example:
        >>> truncate_display("this is a very long string", 10)
        'this is...'
    """
    return text if len(text) <= max_len else text[: max_len - 3] + "..."
