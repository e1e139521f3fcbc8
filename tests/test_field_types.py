"""Tests for field type definitions and base field lookups."""

import pytest

from services.errors import ConfigurationError, SchemaInconsistencyError
from services.field_types import BaseFieldSchema, FieldTypeRegistry


@pytest.mark.parametrize("raw, expected", [("false", False), ("0", False), ("true", True), (1, True)])
def test_no_ui_flag_parsed_as_bool(raw, expected):
    registry = FieldTypeRegistry({"created": {"label": "Created", "no_ui": raw}})
    assert registry.get("created").no_ui is expected


def test_malformed_no_ui_flag():
    with pytest.raises(ConfigurationError, match="created"):
        FieldTypeRegistry({"created": {"no_ui": "sometimes"}})


def test_unknown_type_and_label_fallback():
    registry = FieldTypeRegistry({"string": {}})
    assert registry.get("string").label == "string"
    assert registry.label("geofield") is None
    with pytest.raises(SchemaInconsistencyError):
        registry.get("geofield")


def test_base_field_names():
    schema = BaseFieldSchema({"node": ["nid", "title"]})
    assert schema.get_base_field_names("node") == frozenset({"nid", "title"})
    assert schema.get_base_field_names("user") == frozenset()
