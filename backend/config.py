import os
import json
from pydantic_settings import BaseSettings
from typing import Optional, Dict, Any

class Settings(BaseSettings):
    # Application
    APP_NAME: str = "RevisionCompare Service"
    APP_VERSION: str = "1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5055

    # Comparison
    DIFF_SETTINGS_FILE: Optional[str] = os.getenv("DIFF_SETTINGS_FILE")  # JSON merged over DIFF_SETTINGS
    DIFF_CONTEXT_LINES: int = int(os.getenv("DIFF_CONTEXT_LINES", "2"))
    DIFF_DEFAULT_STATE: str = os.getenv("DIFF_DEFAULT_STATE", "raw")

    class Config:
        env_file = ".env"

settings = Settings()

# Per field type compare settings, plus "entity.<entity_type>.<field_name>"
# switches for base fields and no-UI field types.
DIFF_SETTINGS: Dict[str, Any] = {
    "string": {"compare": True, "show_header": True, "markdown": "none"},
    "string_long": {"compare": True, "show_header": True, "markdown": "none"},
    "text": {"compare": True, "show_header": True, "markdown": "filter_xss_strict"},
    "text_long": {"compare": True, "show_header": True, "markdown": "filter_xss_strict"},
    "text_with_summary": {"compare": True, "show_header": True, "markdown": "html_to_text"},
    "integer": {"compare": True, "show_header": True, "markdown": "none"},
    "decimal": {"compare": True, "show_header": True, "markdown": "none"},
    "float": {"compare": True, "show_header": True, "markdown": "none"},
    "boolean": {"compare": True, "show_header": True, "markdown": "none"},
    "list_string": {"compare": True, "show_header": True, "markdown": "none"},
    "list_integer": {"compare": True, "show_header": True, "markdown": "none"},
    "entity_reference": {"compare": True, "show_header": True, "markdown": "none"},
    "image": {"compare": True, "show_header": True, "markdown": "none"},
    "file": {"compare": True, "show_header": True, "markdown": "none"},
    "link": {"compare": True, "show_header": True, "markdown": "none"},
    "email": {"compare": True, "show_header": True, "markdown": "none"},
    "created": {"compare": False, "show_header": True, "markdown": "none"},
    "changed": {"compare": False, "show_header": True, "markdown": "none"},
    "uuid": {"compare": False, "show_header": False, "markdown": "none"},
    "language": {"compare": True, "show_header": True, "markdown": "none"},
    "entity": {
        "node": {
            "title": True,
            "status": True,
            "uid": False,
            "langcode": False,
            "uuid": False,
            "created": False,
            "changed": False,
        },
    },
}

# Field type table: label and whether the type has a field UI.
FIELD_TYPE_DEFINITIONS: Dict[str, Dict[str, Any]] = {
    "string": {"label": "Text (plain)", "no_ui": False},
    "string_long": {"label": "Text (plain, long)", "no_ui": False},
    "text": {"label": "Text (formatted)", "no_ui": False},
    "text_long": {"label": "Text (formatted, long)", "no_ui": False},
    "text_with_summary": {"label": "Text (formatted, long, with summary)", "no_ui": False},
    "integer": {"label": "Number (integer)", "no_ui": False},
    "decimal": {"label": "Number (decimal)", "no_ui": False},
    "float": {"label": "Number (float)", "no_ui": False},
    "boolean": {"label": "Boolean", "no_ui": False},
    "list_string": {"label": "List (text)", "no_ui": False},
    "list_integer": {"label": "List (integer)", "no_ui": False},
    "entity_reference": {"label": "Entity reference", "no_ui": False},
    "image": {"label": "Image", "no_ui": False},
    "file": {"label": "File", "no_ui": False},
    "link": {"label": "Link", "no_ui": False},
    "email": {"label": "Email", "no_ui": False},
    "created": {"label": "Created", "no_ui": True},
    "changed": {"label": "Last changed", "no_ui": True},
    "uuid": {"label": "UUID", "no_ui": True},
    "language": {"label": "Language", "no_ui": True},
}

# Schema-fixed fields per entity type.
BASE_FIELDS: Dict[str, list] = {
    "node": ["nid", "uuid", "vid", "langcode", "type", "title", "uid", "status", "created", "changed"],
}


def load_diff_settings(path: Optional[str] = None) -> Dict[str, Any]:
    """Default compare settings with the optional JSON file merged on top"""
    merged = json.loads(json.dumps(DIFF_SETTINGS))
    path = path or settings.DIFF_SETTINGS_FILE
    if not path:
        return merged
    with open(path, "r", encoding="utf-8") as f:
        overrides = json.load(f)
    _deep_merge(merged, overrides)
    return merged


def _deep_merge(target: Dict[str, Any], source: Dict[str, Any]) -> None:
    for key, value in source.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _deep_merge(target[key], value)
        else:
            target[key] = value
