"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration
from .runtime_settings import (
    Configuration,
    DefinitionOrdering,
    ExampleSettings,
    OrderingSettings,
    ReferenceSettings,
)

__all__ = [
    "Configuration",
    "DefinitionOrdering",
    "ExampleSettings",
    "OrderingSettings",
    "ReferenceSettings",
    "ConfigurationError",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
