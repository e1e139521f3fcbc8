"""
Revision comparison: builds the per-field diff states of two records.
"""
import logging
from typing import Any, List, Optional

from models.comparison import ComparisonUnit, DiffState, StateLines
from models.entity import Record
from services.aligner import FieldAligner
from services.config_provider import ConfigProvider
from services.diff_engine import split_lines
from services.errors import EntityCapabilityError
from services.field_renderers import FieldRendererRegistry
from services.field_types import BaseFieldSchema, FieldTypeRegistry
from services.normalizer import FieldNormalizer
from services.text_transforms import TextTransformPipeline

logger = logging.getLogger(__name__)

RAW_STATE = "raw"
PLAIN_STATE = "raw_plain"


def check_revisions_supported(left: Any, right: Any) -> None:
    """Both sides must be revisionable records"""
    for side, entity in (("left", left), ("right", right)):
        if not isinstance(entity, Record):
            raise EntityCapabilityError(f"The {side} entity is not a record: {type(entity).__name__}")
        if not entity.revisionable:
            raise EntityCapabilityError(f"The {side} {entity.entity_type} entity is not revisionable")


class DiffStateBuilder:
    """Normalize, align, transform and split two revisions into diff states"""

    def __init__(self, config: ConfigProvider, field_types: FieldTypeRegistry,
                 renderers: FieldRendererRegistry, base_fields: BaseFieldSchema,
                 transforms: Optional[TextTransformPipeline] = None):
        self.config = config
        self.field_types = field_types
        self.renderers = renderers
        self.base_fields = base_fields
        self.transforms = transforms or TextTransformPipeline()

    def compare_revisions(self, left: Record, right: Record) -> List[DiffState]:
        check_revisions_supported(left, right)

        config = self.config.snapshot()
        normalizer = FieldNormalizer(config, self.field_types, self.renderers, self.base_fields)
        aligner = FieldAligner(config, self.field_types)

        left_values = normalizer.normalize(left)
        right_values = normalizer.normalize(right)
        units = aligner.merge(left_values, right_values, left, right)

        result = [self._diff_state(unit) for unit in units]
        logger.info(
            f"Compared {left.entity_type} revisions {left.revision_id} and {right.revision_id}: "
            f"{len(result)} fields"
        )
        return result

    def _diff_state(self, unit: ComparisonUnit) -> DiffState:
        states = {
            RAW_STATE: StateLines(left=split_lines(unit.left_text), right=split_lines(unit.right_text)),
        }
        transform = unit.settings.transform
        if self.transforms.has_transform(transform):
            states[PLAIN_STATE] = StateLines(
                left=split_lines(self.transforms.apply(transform, unit.left_text)),
                right=split_lines(self.transforms.apply(transform, unit.right_text)),
            )
        return DiffState(name=unit.name, label=unit.label, settings=unit.settings, states=states)


def create_default_builder(diff_settings: Optional[dict] = None) -> DiffStateBuilder:
    """Builder wired with the application's settings, field types and renderers"""
    from config import BASE_FIELDS, FIELD_TYPE_DEFINITIONS, load_diff_settings
    from services.field_renderers import default_renderers

    return DiffStateBuilder(
        config=ConfigProvider(diff_settings if diff_settings is not None else load_diff_settings()),
        field_types=FieldTypeRegistry(FIELD_TYPE_DEFINITIONS),
        renderers=FieldRendererRegistry(default_renderers()),
        base_fields=BaseFieldSchema(BASE_FIELDS),
    )
