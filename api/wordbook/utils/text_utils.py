"""
Text utility functions.
"""
from typing import Optional


def is_blank(text: Optional[str]) -> bool:
    """True for None, empty and whitespace-only strings."""
    return text is None or not text.strip()


def equals_ignore_case(left: Optional[str], right: Optional[str]) -> bool:
    """
    Compare two strings case-insensitively.

    Args:
        left: First string (None never matches)
        right: Second string (None never matches)

    Returns:
        True if both are set and equal ignoring case
    """
    if left is None or right is None:
        return False
    return left.casefold() == right.casefold()


def escape_like(text: str, escape_char: str = "\\") -> str:
    """
    Escape LIKE wildcards so the text is matched literally.

    Args:
        text: Raw search text
        escape_char: Escape character used in the LIKE clause

    Returns:
        Text with %, _ and the escape character escaped
    """
    return (
        text.replace(escape_char, escape_char * 2)
        .replace("%", f"{escape_char}%")
        .replace("_", f"{escape_char}_")
    )
