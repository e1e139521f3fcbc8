"""
Merges the rendered fields of two records into comparison units, one per
field name present on either side.
"""
from typing import Dict, List, Optional, Sequence, Tuple

from models.comparison import ComparisonUnit
from models.entity import Record
from services.config_provider import ConfigProvider
from services.field_renderers import LineGroup
from services.field_types import FieldTypeRegistry


def _flatten(value: LineGroup) -> str:
    if isinstance(value, (list, tuple)):
        return "\n".join(str(v) for v in value)
    return str(value)


def combine_fields(left_values: Sequence[LineGroup], right_values: Sequence[LineGroup]) -> Tuple[str, str]:
    """Pair values by position and join each side into a single text.

    combine_fields(["a", "b", "c"], ["x", "y"]) == ("a\\nb\\nc", "x\\ny")
    """
    left, right = [], []
    for delta in range(max(len(left_values), len(right_values))):
        if delta < len(left_values):
            left.append(_flatten(left_values[delta]))
        if delta < len(right_values):
            right.append(_flatten(right_values[delta]))
    return "\n".join(left), "\n".join(right)


class FieldAligner:

    def __init__(self, config: ConfigProvider, field_types: FieldTypeRegistry):
        self.config = config
        self.field_types = field_types

    def merge(self, left_rendered: Dict[str, List[LineGroup]], right_rendered: Dict[str, List[LineGroup]],
              left_record: Record, right_record: Record) -> List[ComparisonUnit]:
        units = []
        pending_right = dict(right_rendered)

        for field_name, values in left_rendered.items():
            right_values = pending_right.pop(field_name, [])
            left_text, right_text = combine_fields(values, right_values)
            units.append(self._unit(left_record, field_name, left_text, right_text))

        # Fields only the right revision has.
        for field_name, values in pending_right.items():
            left_text, right_text = combine_fields([], values)
            units.append(self._unit(right_record, field_name, left_text, right_text))

        return units

    def _unit(self, record: Record, field_name: str, left_text: str, right_text: str) -> ComparisonUnit:
        field = record.get_field(field_name)
        settings = self.config.field_type_settings(field.type)
        return ComparisonUnit(
            name=field_name,
            label=self._label(field, settings.show_header),
            settings=settings,
            left_text=left_text,
            right_text=right_text,
        )

    def _label(self, field, show_header: bool) -> str:
        if not show_header:
            return ""
        return field.label or self.field_types.label(field.type) or field.name
