from .builder import (
    BUILDER_SCHEMA_VERSION,
    ValidationResult,
    create_empty_builder_content,
    is_builder_content,
    resolve_content,
    validate_builder_content,
)
from .records import (
    RecordValidation,
    validate_collection_schema,
    validate_record_data,
)
