from pydantic import BaseModel, Field as PydanticField, model_validator
from typing import Optional, List, Any


class Field(BaseModel):
    """A named, typed field holding an ordered list of values"""
    name: str
    type: str
    label: Optional[str] = None
    values: List[Any] = PydanticField(default_factory=list)


class Record(BaseModel):
    """One revision of a content entity, already loaded by the caller"""
    entity_type: str
    entity_id: Optional[str] = None
    revision_id: Optional[str] = None
    revisionable: bool = True
    fields: List[Field] = PydanticField(default_factory=list)

    @model_validator(mode="after")
    def _unique_field_names(self):
        seen = set()
        for field in self.fields:
            if field.name in seen:
                raise ValueError(f"Duplicate field name: {field.name}")
            seen.add(field.name)
        return self

    def get_field(self, name: str) -> Optional[Field]:
        for field in self.fields:
            if field.name == name:
                return field
        return None
