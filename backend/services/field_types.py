"""
Field type metadata and base field schema lookups.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, FrozenSet, Any

from pydantic import TypeAdapter, ValidationError

from services.errors import ConfigurationError, SchemaInconsistencyError

_BOOL = TypeAdapter(bool)


@dataclass(frozen=True)
class FieldTypeDefinition:
    label: str
    no_ui: bool = False

    @property
    def has_ui_surface(self) -> bool:
        return not self.no_ui


class FieldTypeRegistry:
    """Field type tag -> definition, fixed at construction"""

    def __init__(self, definitions: Mapping[str, Any]):
        parsed = {}
        for type_name, definition in definitions.items():
            if isinstance(definition, FieldTypeDefinition):
                parsed[type_name] = definition
            else:
                try:
                    no_ui = _BOOL.validate_python(definition.get("no_ui", False))
                except ValidationError as e:
                    raise ConfigurationError(f"Malformed no_ui flag for field type '{type_name}'") from e
                parsed[type_name] = FieldTypeDefinition(label=definition.get("label", type_name), no_ui=no_ui)
        self._definitions = MappingProxyType(parsed)

    def get_definitions(self) -> Mapping[str, FieldTypeDefinition]:
        return self._definitions

    def get(self, field_type: str) -> FieldTypeDefinition:
        try:
            return self._definitions[field_type]
        except KeyError:
            raise SchemaInconsistencyError(f"Field type '{field_type}' has no registered definition")

    def label(self, field_type: str) -> Optional[str]:
        definition = self._definitions.get(field_type)
        return definition.label if definition else None


class BaseFieldSchema:
    """Schema-fixed field names per entity type"""

    def __init__(self, base_fields: Optional[Mapping[str, Iterable[str]]] = None):
        self._base_fields: Dict[str, FrozenSet[str]] = {
            entity_type: frozenset(names) for entity_type, names in (base_fields or {}).items()
        }

    def get_base_field_names(self, entity_type: str) -> FrozenSet[str]:
        return self._base_fields.get(entity_type, frozenset())
