"""Cutting job configuration: schema, loader, and adapters."""

from cutplan.application.config.adapter import (
    config_to_material,
    config_to_nesting,
    config_to_parts,
    schema_to_material,
)
from cutplan.application.config.loader import (
    ConfigError,
    extract_validation_errors,
    load_config,
    load_config_from_dict,
    read_json_file,
)
from cutplan.application.config.schema import (
    SUPPORTED_VERSIONS,
    JobConfiguration,
    MaterialConfigSchema,
    NestingConfigSchema,
    PartConfigSchema,
)

__all__ = [
    # Schema
    "SUPPORTED_VERSIONS",
    "JobConfiguration",
    "MaterialConfigSchema",
    "NestingConfigSchema",
    "PartConfigSchema",
    # Loader
    "ConfigError",
    "extract_validation_errors",
    "load_config",
    "load_config_from_dict",
    "read_json_file",
    # Adapters
    "config_to_material",
    "config_to_nesting",
    "config_to_parts",
    "schema_to_material",
]
