"""
Style resolver bound to a theme mapping.

Wraps the style service functions for callers that resolve many styles
against the same theme mapping.
"""

from typing import Dict, List, Optional, Sequence
import logging

from ..mapping.accessors import APPEARANCE_DEFAULT, StyleMapping, ThemeMapping
from ..mapping.loader import compile_component_mapping
from .style_service import StyleEntry, create_all_styles, create_style, get_style

logger = logging.getLogger(__name__)


class StyleResolver:
    """
    Resolves component styles from one theme mapping.

    Provides functionality for:
    - Cascading declared mappings into a final style
    - Precomputing named style entries
    - Looking up precomputed styles
    """

    def __init__(self, mapping: ThemeMapping):
        """
        Initialize style resolver.

        Args:
            mapping: Declared theme mapping
        """
        self.mapping = mapping
        self.compiled: Dict[str, Dict[str, StyleMapping]] = {}

    def resolve(
        self,
        component: str,
        appearance: str = APPEARANCE_DEFAULT,
        variants: Sequence[str] = (),
        states: Sequence[str] = (),
    ) -> StyleMapping:
        """
        Resolve style for component.

        Args:
            component: Component name
            appearance: Appearance applied to component
            variants: Variants applied to component
            states: States in which component is

        Returns:
            Resolved style dictionary
        """
        return create_style(self.mapping, component, appearance, variants, states)

    def resolve_all(
        self,
        component: str,
        appearance: str,
        variants: Sequence[str],
        states: Sequence[str],
    ) -> List[StyleEntry]:
        return create_all_styles(self.mapping, component, appearance, variants, states)

    def compile(
        self,
        component: str,
        appearances: Sequence[str],
        variants: Sequence[str],
        states: Sequence[str],
    ) -> Dict[str, StyleMapping]:
        """
        Compile component and keep the result for ``lookup``.

        Returns:
            Compiled component mapping
        """
        compiled = compile_component_mapping(self.mapping, component, appearances, variants, states)
        self.compiled[component] = compiled
        logger.debug(f"Stored {len(compiled)} compiled keys for {component}")
        return compiled

    def lookup(
        self,
        component: str,
        appearance: str = APPEARANCE_DEFAULT,
        variants: Sequence[str] = (),
        states: Sequence[str] = (),
    ) -> Optional[StyleMapping]:
        """
        Look up a compiled style.

        Returns:
            Compiled style, or None if the component was not compiled or no
            key matches
        """
        return get_style(self.compiled, component, appearance, variants, states)
