"""
Turns a record into {field_name: line groups} for the fields that take part
in the comparison.
"""
import logging
from typing import Dict, List

from models.comparison import ComparisonContext
from models.entity import Field, Record
from services.config_provider import ConfigProvider
from services.field_renderers import FieldRendererRegistry, LineGroup
from services.field_types import BaseFieldSchema, FieldTypeRegistry

logger = logging.getLogger(__name__)


class FieldNormalizer:
    """Decides field participation and renders the eligible fields"""

    def __init__(self, config: ConfigProvider, field_types: FieldTypeRegistry,
                 renderers: FieldRendererRegistry, base_fields: BaseFieldSchema):
        self.config = config
        self.field_types = field_types
        self.renderers = renderers
        self.base_fields = base_fields

    def normalize(self, record: Record) -> Dict[str, List[LineGroup]]:
        result: Dict[str, List[LineGroup]] = {}
        base_field_names = self.base_fields.get_base_field_names(record.entity_type)

        for field in record.fields:
            if not self._is_eligible(record, field, base_field_names):
                logger.debug(f"{record.entity_type}.{field.name} not enabled for comparison")
                continue

            context = ComparisonContext(
                field_type=field.type,
                compare_settings=self.config.field_type_settings(field.type),
            )
            build = self.renderers.build(field, context)
            if build:
                result[field.name] = build

        return result

    def _is_eligible(self, record: Record, field: Field, base_field_names) -> bool:
        definition = self.field_types.get(field.type)

        # No field UI: compared unless switched off explicitly.
        if definition.no_ui:
            override = self.config.field_override(record.entity_type, field.name)
            return True if override is None else override

        # Base fields with a UI type are opt-in.
        if field.name in base_field_names:
            return bool(self.config.field_override(record.entity_type, field.name))

        # Configurable fields opt out through the type's compare setting
        # at render time.
        return True
