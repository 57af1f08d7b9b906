"""Implementor table model and settings helpers."""

from .config import (
    SUPPORTED_CONFIG_SUFFIXES,
    InspectSettings,
    inspect_settings_from_config,
    load_config_mapping,
    load_inspect_settings,
    validate_allowed_keys,
)
from .table import (
    Descriptor,
    ImplementorTable,
    TableSummary,
    copy_table,
    summarize_table,
    table_from_mapping,
)

__all__ = [
    "Descriptor",
    "ImplementorTable",
    "InspectSettings",
    "SUPPORTED_CONFIG_SUFFIXES",
    "TableSummary",
    "copy_table",
    "inspect_settings_from_config",
    "load_config_mapping",
    "load_inspect_settings",
    "summarize_table",
    "table_from_mapping",
    "validate_allowed_keys",
]
