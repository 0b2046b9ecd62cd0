"""State variation generation and weighting."""

from __future__ import annotations

from typing import Callable, List, Sequence

from ..mapping.accessors import SEPARATOR_MAPPING_ENTRY


def create_state_variations(states: Sequence[str], separator: str = SEPARATOR_MAPPING_ENTRY) -> List[str]:
    """
    Build every non-empty combination of ``states`` as a compound state.

    Members of a compound keep their relative order from ``states``, so
    ``['active', 'checked', 'disabled']`` yields seven compounds, among them
    ``'active.disabled'`` but never ``'disabled.active'``.
    """
    variations: List[str] = []
    for index, head in enumerate(states):
        # every compound starting with head, before any starting later
        group = [head]
        for tail in states[index + 1:]:
            group = group + [variation + separator + tail for variation in group]
        variations.extend(group)
    return variations


def get_state_variation_weight(
    state: str,
    state_weight: Callable[[str], float],
    separator: str = SEPARATOR_MAPPING_ENTRY,
) -> float:
    # every part adds the compound length, so a compound outweighs its subsets
    parts = state.split(separator)
    return sum(state_weight(part) + len(parts) for part in parts)


def sort_state_variations(
    variations: Sequence[str],
    state_weight: Callable[[str], float],
    separator: str = SEPARATOR_MAPPING_ENTRY,
) -> List[str]:
    """Order compound states from the least to the most specific."""
    return sorted(
        variations,
        key=lambda variation: get_state_variation_weight(variation, state_weight, separator),
    )
