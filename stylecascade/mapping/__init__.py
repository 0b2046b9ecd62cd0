"""
Theme mapping access.

This module contains the lookups the style cascade performs against a theme
mapping, together with loading, validation and compilation of mappings.
"""

from .accessors import (
    APPEARANCE_DEFAULT,
    SEPARATOR_MAPPING_ENTRY,
    compose_key,
    get_component_mapping,
    get_mapping_entry,
    get_stateless_appearance_mapping,
    get_stateless_variant_mapping,
    get_state_appearance_mapping,
    get_state_variant_mapping,
)
from .loader import (
    compile_component_mapping,
    load_theme_mapping,
    save_theme_mapping,
    validate_theme_mapping,
)

__all__ = [
    "APPEARANCE_DEFAULT",
    "SEPARATOR_MAPPING_ENTRY",
    "compose_key",
    "get_component_mapping",
    "get_mapping_entry",
    "get_stateless_appearance_mapping",
    "get_stateless_variant_mapping",
    "get_state_appearance_mapping",
    "get_state_variant_mapping",
    "compile_component_mapping",
    "load_theme_mapping",
    "save_theme_mapping",
    "validate_theme_mapping",
]
