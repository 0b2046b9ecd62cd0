"""
Theme mapping loading and compilation.

Reads theme mappings from JSON files, checks their structure and compiles
component mappings into the precomputed form consumed by ``get_style``.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Sequence, Union

from ..exceptions import MappingError
from .accessors import StyleMapping, ThemeMapping

logger = logging.getLogger(__name__)


def validate_theme_mapping(data: Any) -> Dict[str, Dict[str, StyleMapping]]:
    """
    Validate the structure of a theme mapping.

    Only the shape is checked: component names and style keys must be
    non-empty strings and every style entry must be an object. Facet names
    are not checked against anything.

    Args:
        data: Decoded theme mapping

    Returns:
        Theme mapping as plain dictionaries

    Raises:
        MappingError: If the structure is invalid
    """
    if not isinstance(data, dict):
        raise MappingError("Theme mapping must be an object", details=type(data).__name__)

    result: Dict[str, Dict[str, StyleMapping]] = {}
    for component, component_mapping in data.items():
        if not isinstance(component, str) or not component:
            raise MappingError("Component name must be a non-empty string", details=repr(component))
        if not isinstance(component_mapping, dict):
            raise MappingError(
                f"Mapping of component {component!r} must be an object",
                details=type(component_mapping).__name__,
            )

        entries: Dict[str, StyleMapping] = {}
        for key, style in component_mapping.items():
            if not isinstance(key, str) or not key:
                raise MappingError(f"Style key in {component!r} must be a non-empty string", details=repr(key))
            if not isinstance(style, dict):
                raise MappingError(
                    f"Style {component}[{key!r}] must be an object",
                    details=type(style).__name__,
                )
            entries[key] = dict(style)
        result[component] = entries

    logger.debug(f"Validated theme mapping with {len(result)} components")
    return result


def load_theme_mapping(path: Union[str, Path]) -> Dict[str, Dict[str, StyleMapping]]:
    """
    Load a theme mapping from a JSON file.

    Raises:
        MappingError: If the file is missing, not JSON or structurally invalid
    """
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise MappingError(f"Cannot read theme mapping {file_path}", details=str(e)) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MappingError(f"Invalid JSON in {file_path}", details=str(e)) from e

    mapping = validate_theme_mapping(data)
    logger.info(f"Loaded theme mapping from {file_path} ({len(mapping)} components)")
    return mapping


def save_theme_mapping(mapping: Mapping[str, Any], path: Union[str, Path]) -> Path:
    """Write a theme mapping as indented JSON and return the written path."""
    file_path = Path(path)
    if file_path.parent and not file_path.parent.exists():
        file_path.parent.mkdir(parents=True, exist_ok=True)

    file_path.write_text(
        json.dumps(mapping, indent=2, ensure_ascii=False, sort_keys=True),
        encoding="utf-8",
    )
    logger.info(f"Saved theme mapping to {file_path}")
    return file_path


def compile_component_mapping(
    mapping: ThemeMapping,
    component: str,
    appearances: Sequence[str],
    variants: Sequence[str],
    states: Sequence[str],
) -> Dict[str, StyleMapping]:
    """
    Precompute every named style entry of a component.

    Runs ``create_all_styles`` once per appearance and collects the entries
    into a component mapping keyed by compiled style keys.

    Args:
        mapping: Declared theme mapping
        component: Component name
        appearances: Appearances to compile
        variants: Variants to compile
        states: States to compile

    Returns:
        Compiled component mapping
    """
    from ..styles.style_service import create_all_styles

    compiled: Dict[str, StyleMapping] = {}
    for appearance in appearances:
        for key, style in create_all_styles(mapping, component, appearance, variants, states):
            compiled[key] = style

    logger.debug(f"Compiled {len(compiled)} style keys for {component}")
    return compiled
