"""Shared fixtures for the comparison tests."""

import pytest

from models.entity import Field, Record
from services.config_provider import ConfigProvider
from services.diff_state_builder import DiffStateBuilder
from services.field_renderers import FieldRendererRegistry, default_renderers
from services.field_types import BaseFieldSchema, FieldTypeRegistry


FIELD_TYPES = {
    "string": {"label": "Text (plain)", "no_ui": False},
    "text_long": {"label": "Text (formatted, long)", "no_ui": False},
    "list_string": {"label": "List (text)", "no_ui": False},
    "integer": {"label": "Number (integer)", "no_ui": False},
    "created": {"label": "Created", "no_ui": True},
    "uuid": {"label": "UUID", "no_ui": True},
}

DIFF_SETTINGS = {
    "string": {"compare": True, "show_header": True, "markdown": "none"},
    "text_long": {"compare": True, "show_header": True, "markdown": "filter_xss_strict"},
    "list_string": {"compare": True, "show_header": False, "markdown": "none"},
    "integer": {"compare": False, "show_header": True, "markdown": "none"},
    "created": {"compare": True, "show_header": True, "markdown": "none"},
    "uuid": {"compare": True, "show_header": True, "markdown": "none"},
    "entity": {
        "node": {
            "title": True,
            "uuid": False,
        },
    },
}

BASE_FIELDS = {"node": ["nid", "uuid", "title", "status", "created"]}


def make_record(*fields, entity_type="node", revision_id="1", revisionable=True) -> Record:
    """Record from (name, type, values) or (name, type, values, label) tuples."""
    return Record(
        entity_type=entity_type,
        entity_id="42",
        revision_id=revision_id,
        revisionable=revisionable,
        fields=[
            Field(name=f[0], type=f[1], values=list(f[2]), label=f[3] if len(f) > 3 else None)
            for f in fields
        ],
    )


@pytest.fixture
def config() -> ConfigProvider:
    return ConfigProvider(DIFF_SETTINGS)


@pytest.fixture
def field_types() -> FieldTypeRegistry:
    return FieldTypeRegistry(FIELD_TYPES)


@pytest.fixture
def renderers() -> FieldRendererRegistry:
    return FieldRendererRegistry(default_renderers())


@pytest.fixture
def base_fields() -> BaseFieldSchema:
    return BaseFieldSchema(BASE_FIELDS)


@pytest.fixture
def builder(config, field_types, renderers, base_fields) -> DiffStateBuilder:
    return DiffStateBuilder(config, field_types, renderers, base_fields)
