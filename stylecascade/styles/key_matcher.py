"""Order-independent lookup of compiled style keys."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..mapping.accessors import SEPARATOR_MAPPING_ENTRY


def find_style_key(source: Iterable[str], query: Sequence[str]) -> Optional[str]:
    """
    Finds a key in ``source`` built from exactly the ``query`` tokens.

    Example:
        source = ['default.error.small.checked', ...]
        query = ['default', 'small', 'error', 'checked']

        will return 'default.error.small.checked'

    Args:
        source: Style keys
        query: Key parts to search, in any order

    Returns:
        First matching key, or None
    """
    expected = set(query)
    for key in source:
        if set(key.split(SEPARATOR_MAPPING_ENTRY)) == expected:
            return key
    return None
