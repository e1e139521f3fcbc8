"""
Field renderers: turn a field's values into line groups for comparison.

Every renderer returns one entry per value (delta). An entry is a string or a
list of strings; the aligner joins list entries with newlines.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Union

from models.comparison import ComparisonContext
from models.entity import Field

logger = logging.getLogger(__name__)

LineGroup = Union[str, List[str]]


def _item_value(item: Any) -> Any:
    if isinstance(item, Mapping):
        return item.get("value")
    return item


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


class FieldRenderer:
    """Base renderer: one line per value, the value stringified"""

    def build(self, field: Field, context: ComparisonContext) -> List[LineGroup]:
        result = []
        for item in field.values:
            lines = self.render_item(item, context)
            if lines:
                result.append(lines)
        return result

    def render_item(self, item: Any, context: ComparisonContext) -> Optional[LineGroup]:
        value = _item_value(item)
        if value is None:
            return None
        return _as_text(value)


class TextFieldRenderer(FieldRenderer):
    """Plain and formatted text; shows the text format when compare_format is on"""

    def render_item(self, item, context):
        lines = []
        value = _item_value(item)
        if value is not None:
            lines.append(_as_text(value))
        text_format = item.get("format") if isinstance(item, Mapping) else None
        if text_format and context.compare_settings.model_extra.get("compare_format"):
            lines.append(f"Format: {text_format}")
        return lines or None


class TextWithSummaryRenderer(TextFieldRenderer):
    """Formatted text with an optional summary line block before the body"""

    def render_item(self, item, context):
        lines = []
        summary = item.get("summary") if isinstance(item, Mapping) else None
        if summary and context.compare_settings.model_extra.get("compare_summary", True):
            lines.append(f"Summary: {summary}")
        body = super().render_item(item, context)
        if body:
            lines.extend(body)
        return lines or None


class BooleanRenderer(FieldRenderer):

    def render_item(self, item, context):
        value = _item_value(item)
        if value is None:
            return None
        on_label = context.compare_settings.model_extra.get("on_label", "On")
        off_label = context.compare_settings.model_extra.get("off_label", "Off")
        return on_label if value in (True, 1, "1", "true") else off_label


class EntityReferenceRenderer(FieldRenderer):
    """Referenced entity label, falling back to its id"""

    def render_item(self, item, context):
        if isinstance(item, Mapping):
            label = item.get("label")
            target_id = item.get("target_id")
            if label:
                return f"{label} ({target_id})" if target_id is not None else _as_text(label)
            return _as_text(target_id) if target_id is not None else None
        return super().render_item(item, context)


class FileRenderer(FieldRenderer):

    def render_item(self, item, context):
        if not isinstance(item, Mapping):
            return super().render_item(item, context)
        lines = []
        name = item.get("filename") or item.get("target_id")
        if name is not None:
            lines.append(f"File: {name}")
        if item.get("description"):
            lines.append(f"Description: {item['description']}")
        return lines or None


class ImageRenderer(FileRenderer):

    def render_item(self, item, context):
        lines = super().render_item(item, context)
        if not isinstance(item, Mapping):
            return lines
        lines = list(lines or [])
        if item.get("alt"):
            lines.append(f"Alt: {item['alt']}")
        if item.get("title"):
            lines.append(f"Title: {item['title']}")
        return lines or None


class LinkRenderer(FieldRenderer):

    def render_item(self, item, context):
        if not isinstance(item, Mapping):
            return super().render_item(item, context)
        lines = []
        if item.get("title"):
            lines.append(_as_text(item["title"]))
        if item.get("uri"):
            lines.append(_as_text(item["uri"]))
        return lines or None


class TimestampRenderer(FieldRenderer):
    """Unix timestamps as ISO 8601 UTC"""

    def render_item(self, item, context):
        value = _item_value(item)
        if value is None:
            return None
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return datetime.fromtimestamp(value, tz=timezone.utc).isoformat()
        return _as_text(value)


class FieldRendererRegistry:
    """Dispatches a field to the renderer registered for its type"""

    def __init__(self, renderers: Optional[Mapping[str, FieldRenderer]] = None):
        self._renderers: Dict[str, FieldRenderer] = dict(renderers or {})

    def build(self, field: Field, context: ComparisonContext) -> List[LineGroup]:
        """Line groups for the field, empty when its type is not compared"""
        if not context.compare_settings.compare:
            logger.debug(f"Field type {context.field_type} excluded by settings, skipping {field.name}")
            return []
        renderer = self._renderers.get(context.field_type)
        if renderer is None:
            logger.debug(f"No renderer for field type {context.field_type}, skipping {field.name}")
            return []
        return renderer.build(field, context)


def default_renderers() -> Dict[str, FieldRenderer]:
    text = TextFieldRenderer()
    plain = FieldRenderer()
    timestamp = TimestampRenderer()
    return {
        "string": text,
        "string_long": text,
        "text": text,
        "text_long": text,
        "text_with_summary": TextWithSummaryRenderer(),
        "email": text,
        "uuid": text,
        "language": text,
        "integer": plain,
        "decimal": plain,
        "float": plain,
        "list_string": plain,
        "list_integer": plain,
        "boolean": BooleanRenderer(),
        "entity_reference": EntityReferenceRenderer(),
        "file": FileRenderer(),
        "image": ImageRenderer(),
        "link": LinkRenderer(),
        "created": timestamp,
        "changed": timestamp,
    }
