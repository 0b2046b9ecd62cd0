"""
Tests for theme mapping accessors.
"""

import pytest

from stylecascade.mapping.accessors import (
    compose_key,
    get_component_mapping,
    get_mapping_entry,
    get_state_appearance_mapping,
    get_state_variant_mapping,
    get_stateless_appearance_mapping,
    get_stateless_variant_mapping,
)


class TestMappingAccessors:
    """Test cases for the mapping lookups."""

    def test_compose_key(self):
        assert compose_key(["default", "success", "active.checked"]) == "default.success.active.checked"
        assert compose_key(["a", "b"], separator="|") == "a|b"

    def test_get_component_mapping(self, theme_mapping):
        assert get_component_mapping(theme_mapping, "Button") is theme_mapping["Button"]
        assert get_component_mapping(theme_mapping, "Input") is None
        assert get_component_mapping(None, "Button") is None

    def test_stateless_appearance(self, theme_mapping):
        assert get_stateless_appearance_mapping(theme_mapping, "Button", "outline") == {
            "color": "gray",
            "borderWidth": 1,
        }

    def test_stateless_variant(self, theme_mapping):
        assert get_stateless_variant_mapping(theme_mapping, "Button", "default", "success") == {"color": "green"}

    def test_state_appearance(self, theme_mapping):
        assert get_state_appearance_mapping(theme_mapping, "Button", "default", "active.checked") == {"opacity": 1}

    def test_state_variant(self, theme_mapping):
        assert get_state_variant_mapping(theme_mapping, "Button", "default", "success", "active") == {
            "color": "darkgreen"
        }

    @pytest.mark.parametrize("tokens", [
        ["filled"],
        ["default", "huge"],
        ["outline", "success", "active"],
    ])
    def test_missing_entry(self, theme_mapping, tokens):
        assert get_mapping_entry(theme_mapping, "Button", tokens) is None

    def test_missing_component(self, theme_mapping):
        assert get_stateless_appearance_mapping(theme_mapping, "Input", "default") is None

    def test_non_mapping_entry(self, theme_mapping, caplog):
        """Test that a malformed entry is skipped with a warning."""
        theme_mapping["Button"]["default.broken"] = "red"

        assert get_stateless_variant_mapping(theme_mapping, "Button", "default", "broken") is None
        assert "default.broken" in caplog.text
