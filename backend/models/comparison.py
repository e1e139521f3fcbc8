from dataclasses import dataclass
from pydantic import BaseModel, ConfigDict, Field, computed_field
from typing import Optional, List, Dict

NO_TRANSFORM = "none"


class CompareSettings(BaseModel):
    """Compare settings of one field type"""
    model_config = ConfigDict(extra="allow", frozen=True)

    compare: bool = True
    show_header: bool = True
    markdown: Optional[str] = NO_TRANSFORM

    @property
    def transform(self) -> Optional[str]:
        """Transform to apply for the secondary state, None when there is none"""
        if not self.markdown or self.markdown == NO_TRANSFORM:
            return None
        return self.markdown


@dataclass(frozen=True)
class ComparisonContext:
    """Per-field data handed to a field renderer"""
    field_type: str
    compare_settings: CompareSettings


@dataclass(frozen=True)
class ComparisonUnit:
    """One field of both revisions, values joined into a single text per side"""
    name: str
    label: str
    settings: CompareSettings
    left_text: str
    right_text: str


class StateLines(BaseModel):
    """Left and right lines of one state; counts always follow the lines"""
    left: List[str] = Field(default_factory=list)
    right: List[str] = Field(default_factory=list)

    @computed_field
    @property
    def count_left(self) -> int:
        return len(self.left)

    @computed_field
    @property
    def count_right(self) -> int:
        return len(self.right)


class DiffState(BaseModel):
    """Comparison result of one field, keyed by state name ("raw", "raw_plain")"""
    name: str
    label: str = ""
    settings: CompareSettings = Field(default_factory=CompareSettings)
    states: Dict[str, StateLines] = Field(default_factory=dict)
