from services.errors import DiffError, SchemaInconsistencyError, ConfigurationError, EntityCapabilityError
from services.config_provider import ConfigProvider
from services.field_types import FieldTypeDefinition, FieldTypeRegistry, BaseFieldSchema
from services.field_renderers import FieldRenderer, FieldRendererRegistry, default_renderers
from services.normalizer import FieldNormalizer
from services.aligner import FieldAligner, combine_fields
from services.text_transforms import TextTransformPipeline
from services.diff_engine import LineDiffEngine, DiffOp, split_lines
from services.diff_formatter import DiffFormatter, LineStats
from services.diff_state_builder import DiffStateBuilder, check_revisions_supported, create_default_builder
