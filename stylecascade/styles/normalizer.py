"""
Facet normalization.

Appearances, variants and states arrive from callers as loose lists that may
contain blanks, None values and duplicates. Everything downstream expects
clean, ordered, unique tokens.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional

from ..exceptions import FacetError
from ..mapping.accessors import APPEARANCE_DEFAULT, SEPARATOR_MAPPING_ENTRY
from .state_variations import create_state_variations, sort_state_variations


def normalize(tokens: Iterable[Optional[str]]) -> List[str]:
    """
    Drop empty tokens and duplicates, keeping first-occurrence order.

    Example:
        ['', 'success', None, 'success', 'tiny'] => ['success', 'tiny']
    """
    result: List[str] = []
    seen = set()
    for token in tokens:
        if not token or token in seen:
            continue
        seen.add(token)
        result.append(token)
    return result


def validate_facets(tokens: Iterable[str], separator: str = SEPARATOR_MAPPING_ENTRY) -> None:
    """Reject tokens that would be split apart when a style key is decomposed."""
    for token in tokens:
        if separator in token:
            raise FacetError(
                f"Facet {token!r} contains the key separator",
                details=f"separator is {separator!r}",
            )


def normalize_appearance(appearance: Optional[str]) -> List[str]:
    """
    Creates normalized list of component appearances.

    Example:
        '' => ['default']
        'bold' => ['default', 'bold']
        'default' => ['default']

    Args:
        appearance: Appearance applied to component

    Returns:
        Default appearance followed by the requested one, if different
    """
    result = normalize([APPEARANCE_DEFAULT, appearance])
    validate_facets(result)
    return result


def normalize_variants(variants: Iterable[Optional[str]]) -> List[str]:
    """
    Creates normalized list of component variants.

    Example:
        [''] => []
        ['success', 'success', 'tiny'] => ['success', 'tiny']
    """
    result = normalize(variants)
    validate_facets(result)
    return result


def normalize_states(
    states: Iterable[Optional[str]],
    state_weight: Callable[[str], float],
    separator: str = SEPARATOR_MAPPING_ENTRY,
) -> List[str]:
    """
    Creates normalized list of component states, including compound states.

    Example:
        [''] => []
        ['active'] => ['active']
        ['active', 'checked'] => ['active', 'checked', 'active.checked']

    Args:
        states: States in which component is
        state_weight: Weight of a single state, usually its index in ``states``
        separator: Compound state separator

    Returns:
        Every combination of states, ordered from least to most specific
    """
    preprocess = normalize(states)
    if not preprocess:
        return preprocess

    validate_facets(preprocess, separator)
    variations = create_state_variations(preprocess, separator)
    return sort_state_variations(variations, state_weight, separator)
