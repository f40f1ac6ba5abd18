"""
Helpers for the comma-separated text columns.

Relations such as question tags, votes, moderation lists and badge holders are
stored as a single text value (``"go, programming"``) rather than join rows.
`split_flat_list` turns that representation into a Python list.
"""

from typing import List, Optional


def split_flat_list(value: Optional[str]) -> List[str]:
    """
    Split a flat text list into its items.

    Whitespace around items is dropped, as are empty items, so ``""`` and
    ``None`` both give ``[]``.

    >>> split_flat_list("go, programming")
    ['go', 'programming']
    """
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]
