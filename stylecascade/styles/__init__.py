"""
Style resolution for themed components.

This module contains the facet normalizer, the state variation generator,
the style cascade and the compiled key matcher.
"""

from .normalizer import normalize, normalize_appearance, normalize_states, normalize_variants
from .state_variations import create_state_variations, sort_state_variations
from .key_matcher import find_style_key
from .style_service import create_all_styles, create_style, get_style
from .style_resolver import StyleResolver

__all__ = [
    "normalize",
    "normalize_appearance",
    "normalize_states",
    "normalize_variants",
    "create_state_variations",
    "sort_state_variations",
    "find_style_key",
    "create_all_styles",
    "create_style",
    "get_style",
    "StyleResolver",
]
