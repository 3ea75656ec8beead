"""Module de configuration."""

from cmd_builder.config.loader import (
    ConfigLoader,
    ConfigFileLoader,
    FileConfigLoader,
    validate_with_schema,
)
from cmd_builder.config.schema import FactorySettings
from cmd_builder.config.factory_loader import FactoryOptionsLoader

__all__ = [
    "ConfigLoader",
    "ConfigFileLoader",
    "FileConfigLoader",
    "validate_with_schema",
    "FactorySettings",
    "FactoryOptionsLoader",
]
