from models.entity import Field, Record
from models.comparison import CompareSettings, ComparisonContext, ComparisonUnit, StateLines, DiffState
