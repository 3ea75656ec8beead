"""Module de gestion des erreurs."""

from cmd_builder.errors.exceptions import (CommandError,
                                           CommandStateError,
                                           CommandAlreadyStartedError,
                                           CommandNotStartedError,
                                           ConfigurationError,
                                           FileConfigurationError)


__all__ = [
    "CommandError",
    "CommandStateError",
    "CommandAlreadyStartedError",
    "CommandNotStartedError",
    "ConfigurationError",
    "FileConfigurationError",
]
