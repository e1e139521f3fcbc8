"""
Read-only compare settings lookup.
Keys are dotted strings: "<field_type>" or "entity.<entity_type>.<field_name>".
"""
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from pydantic import TypeAdapter, ValidationError

from models.comparison import CompareSettings
from services.errors import ConfigurationError

_BOOL = TypeAdapter(bool)


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, list):
        return tuple(_freeze(v) for v in value)
    return value


class ConfigProvider:
    """Immutable snapshot of compare settings"""

    def __init__(self, data: Optional[Mapping[str, Any]] = None):
        self._data = _freeze(dict(data or {}))

    def snapshot(self) -> "ConfigProvider":
        # The backing mapping is already frozen, sharing it is safe.
        clone = ConfigProvider.__new__(ConfigProvider)
        clone._data = self._data
        return clone

    def get(self, key: str, default: Any = None) -> Any:
        """Value stored under a dotted key, or default when any segment is missing"""
        if key in self._data:
            return self._data[key]
        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, Mapping) or part not in node:
                return default
            node = node[part]
        return node

    def field_type_settings(self, field_type: str) -> CompareSettings:
        raw = self.get(field_type)
        if raw is None:
            return CompareSettings()
        if not isinstance(raw, Mapping):
            raise ConfigurationError(f"Settings for field type '{field_type}' must be a mapping, got {type(raw).__name__}")
        try:
            return CompareSettings.model_validate(dict(raw))
        except ValidationError as e:
            raise ConfigurationError(f"Malformed settings for field type '{field_type}': {e}") from e

    def field_override(self, entity_type: str, field_name: str) -> Optional[bool]:
        """Per-field switch, None when no override is configured"""
        key = f"entity.{entity_type}.{field_name}"
        raw = self.get(key)
        if raw is None:
            return None
        try:
            return _BOOL.validate_python(raw)
        except ValidationError as e:
            raise ConfigurationError(f"Malformed value for '{key}': {raw!r}") from e

    def to_dict(self) -> Dict[str, Any]:
        def thaw(value: Any) -> Any:
            if isinstance(value, Mapping):
                return {k: thaw(v) for k, v in value.items()}
            if isinstance(value, tuple):
                return [thaw(v) for v in value]
            return value
        return thaw(self._data)
