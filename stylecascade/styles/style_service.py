"""
Style service.

Composes the effective style of a component from the layers declared in a
theme mapping, precomputes named style entries and looks them up again.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from ..mapping.accessors import (
    APPEARANCE_DEFAULT,
    SEPARATOR_MAPPING_ENTRY,
    StyleMapping,
    ThemeMapping,
    compose_key,
    get_component_mapping,
    get_state_appearance_mapping,
    get_state_variant_mapping,
    get_stateless_appearance_mapping,
    get_stateless_variant_mapping,
)
from .key_matcher import find_style_key
from .normalizer import (
    normalize,
    normalize_appearance,
    normalize_states,
    normalize_variants,
    validate_facets,
)

logger = logging.getLogger(__name__)

StyleEntry = Tuple[str, StyleMapping]


def overlay(items: Iterable[str], layer: Callable[[str], Optional[StyleMapping]]) -> StyleMapping:
    """Merge the layer of every item in order, later items winning per key."""
    result: StyleMapping = {}
    for item in items:
        mapping = layer(item)
        if mapping:
            result.update(mapping)
    return result


def create_style(
    mapping: ThemeMapping,
    component: str,
    appearance: str = APPEARANCE_DEFAULT,
    variants: Sequence[str] = (),
    states: Sequence[str] = (),
) -> StyleMapping:
    """
    Creates style for an appearance, its variants and the states component is in.

    Example:

        appearance = 'outline'
        variants = ['success', 'large']
        states = ['active', 'checked']

        a  = `default` + `outline`                      - appearance mappings
        v  = `success` of `default`, `success` of `outline`,
             `large` of `default`, `large` of `outline` - variant mappings
        s  = for `active`, `checked`, `active.checked`:
             state of `default`, state of `outline`,
             state of `default success`, state of `outline success`,
             state of `default large`, state of `outline large`

        result = a + v + s

    Args:
        mapping: Theme mapping
        component: Component name
        appearance: Appearance applied to component
        variants: Variants applied to component
        states: States in which component is

    Returns:
        Style attributes declared in the mapping, merged by precedence
    """
    source_states = list(states)

    def state_weight(state: str) -> int:
        return source_states.index(state)

    appearances = normalize_appearance(appearance)
    normalized_variants = normalize_variants(variants)
    normalized_states = normalize_states(source_states, state_weight)

    appearance_mapping = overlay(
        appearances,
        lambda apce: get_stateless_appearance_mapping(mapping, component, apce),
    )

    variant_mapping = overlay(
        normalized_variants,
        lambda variant: overlay(
            appearances,
            lambda apce: get_stateless_variant_mapping(mapping, component, apce, variant),
        ),
    )

    def state_layer(state: str) -> StyleMapping:
        appearance_state_mapping = overlay(
            appearances,
            lambda apce: get_state_appearance_mapping(mapping, component, apce, state),
        )
        variant_state_mapping = overlay(
            normalized_variants,
            lambda variant: overlay(
                appearances,
                lambda apce: get_state_variant_mapping(mapping, component, apce, variant, state),
            ),
        )
        return {**appearance_state_mapping, **variant_state_mapping}

    state_mapping = overlay(normalized_states, state_layer)

    logger.debug(
        f"Resolved {component} appearances={appearances} variants={normalized_variants} "
        f"states={normalized_states}"
    )
    return {**appearance_mapping, **variant_mapping, **state_mapping}


def create_style_entry(
    mapping: ThemeMapping,
    component: str,
    key: str,
    appearance: str,
    variant: str = "",
    state: str = "",
) -> StyleEntry:
    value = create_style(
        mapping,
        component,
        appearance,
        [variant] if variant else [],
        [state] if state else [],
    )
    return key, value


def create_all_styles(
    mapping: ThemeMapping,
    component: str,
    appearance: str,
    variants: Sequence[str],
    states: Sequence[str],
) -> List[StyleEntry]:
    """
    Creates a named style entry for every explicit facet combination of an appearance.

    Produces the stateless entry, one entry per state, one per variant and one
    per (variant, state) pair. Compound states are not enumerated.

    Returns:
        List of (key, style) pairs, e.g. ('default.success.active', {...})
    """
    appearance = appearance or APPEARANCE_DEFAULT

    stateless = create_style_entry(mapping, component, appearance, appearance)

    with_states = [
        create_style_entry(mapping, component, compose_key([appearance, state]), appearance, state=state)
        for state in states
    ]

    with_variants = [
        create_style_entry(mapping, component, compose_key([appearance, variant]), appearance, variant=variant)
        for variant in variants
    ]

    with_variant_states = [
        create_style_entry(
            mapping,
            component,
            compose_key([appearance, variant, state]),
            appearance,
            variant=variant,
            state=state,
        )
        for variant in variants
        for state in states
    ]

    entries = [stateless, *with_states, *with_variants, *with_variant_states]
    logger.debug(f"Created {len(entries)} style entries for {component}[{appearance!r}]")
    return entries


def get_style(
    mapping: Optional[ThemeMapping],
    component: str,
    appearance: str,
    variants: Sequence[str] = (),
    states: Sequence[str] = (),
) -> Optional[StyleMapping]:
    """
    Gets a precompiled style by its facets, in any order.

    Args:
        mapping: Theme mapping whose component mappings were built by
            ``create_all_styles``
        component: Component name
        appearance: Appearance applied to component
        variants: Variants applied to component
        states: States in which component is

    Returns:
        Compiled style, or None if the component or key is unknown

    Raises:
        FacetError: If a facet contains the key separator
    """
    query = normalize([appearance or APPEARANCE_DEFAULT, *variants, *states])
    validate_facets(query)

    component_mapping = get_component_mapping(mapping, component)
    if component_mapping is None:
        logger.debug(f"Unknown component: {component}")
        return None

    key = find_style_key(component_mapping.keys(), query)
    if key is None:
        logger.debug(f"No compiled key for {component} matching {SEPARATOR_MAPPING_ENTRY.join(query)!r}")
        return None

    return component_mapping[key]
