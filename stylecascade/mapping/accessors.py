"""
Theme mapping accessors.

A theme mapping maps a component name to its component mapping, which in turn
maps a style key to a style attribute dictionary. Style keys are facet tokens
joined by ``SEPARATOR_MAPPING_ENTRY``::

    {
        "Button": {
            "default": {"backgroundColor": "blue"},
            "default.success": {"backgroundColor": "green"},
            "default.active": {"opacity": 0.8},
            "default.success.active.checked": {"borderWidth": 2},
        }
    }

All four accessors share a single lookup; they only differ in which facets
they compose into the key.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Sequence

logger = logging.getLogger(__name__)

APPEARANCE_DEFAULT = "default"
SEPARATOR_MAPPING_ENTRY = "."

StyleMapping = Dict[str, Any]
ComponentMapping = Mapping[str, StyleMapping]
ThemeMapping = Mapping[str, ComponentMapping]


def compose_key(tokens: Sequence[str], separator: str = SEPARATOR_MAPPING_ENTRY) -> str:
    """Join facet tokens into a style key."""
    return separator.join(tokens)


def get_component_mapping(mapping: Optional[ThemeMapping], component: str) -> Optional[ComponentMapping]:
    if not mapping:
        return None
    return mapping.get(component)


def get_mapping_entry(
    mapping: Optional[ThemeMapping],
    component: str,
    tokens: Sequence[str],
) -> Optional[StyleMapping]:
    """
    Look up the style attributes stored under the key composed from ``tokens``.

    Args:
        mapping: Theme mapping
        component: Component name
        tokens: Ordered facet tokens forming the key

    Returns:
        Stored style dictionary, or None if the component or key is absent
    """
    component_mapping = get_component_mapping(mapping, component)
    if component_mapping is None:
        return None

    key = compose_key(tokens)
    entry = component_mapping.get(key)
    if entry is None:
        return None
    if not isinstance(entry, Mapping):
        logger.warning(f"Ignoring non-mapping entry {component}[{key!r}]")
        return None

    logger.debug(f"Mapping hit: {component}[{key!r}]")
    return entry


def get_stateless_appearance_mapping(
    mapping: Optional[ThemeMapping],
    component: str,
    appearance: str,
) -> Optional[StyleMapping]:
    return get_mapping_entry(mapping, component, [appearance])


def get_stateless_variant_mapping(
    mapping: Optional[ThemeMapping],
    component: str,
    appearance: str,
    variant: str,
) -> Optional[StyleMapping]:
    return get_mapping_entry(mapping, component, [appearance, variant])


def get_state_appearance_mapping(
    mapping: Optional[ThemeMapping],
    component: str,
    appearance: str,
    state: str,
) -> Optional[StyleMapping]:
    return get_mapping_entry(mapping, component, [appearance, state])


def get_state_variant_mapping(
    mapping: Optional[ThemeMapping],
    component: str,
    appearance: str,
    variant: str,
    state: str,
) -> Optional[StyleMapping]:
    return get_mapping_entry(mapping, component, [appearance, variant, state])
