"""
stylecascade - style resolution for themed UI components.

Computes the effective style of a component from a theme mapping, given its
appearance, variants and the states it is in.

Main Components:
- Styles: facet normalization, state variations, cascade and key matching
- Mapping: theme mapping lookups, loading and compilation
- Utils: logging and console output
"""

__version__ = "0.1.0"

from .exceptions import FacetError, MappingError, StyleCascadeError
from .mapping import (
    APPEARANCE_DEFAULT,
    SEPARATOR_MAPPING_ENTRY,
    compile_component_mapping,
    load_theme_mapping,
    save_theme_mapping,
    validate_theme_mapping,
)
from .styles import (
    StyleResolver,
    create_all_styles,
    create_style,
    find_style_key,
    get_style,
    normalize_appearance,
    normalize_states,
    normalize_variants,
)

__all__ = [
    "__version__",
    "StyleCascadeError",
    "FacetError",
    "MappingError",
    "APPEARANCE_DEFAULT",
    "SEPARATOR_MAPPING_ENTRY",
    "compile_component_mapping",
    "load_theme_mapping",
    "save_theme_mapping",
    "validate_theme_mapping",
    "StyleResolver",
    "create_all_styles",
    "create_style",
    "find_style_key",
    "get_style",
    "normalize_appearance",
    "normalize_states",
    "normalize_variants",
]
