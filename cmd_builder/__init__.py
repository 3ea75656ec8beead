"""
cmd_builder - Construction fluent et exécution de processus externes.

Modules disponibles:
- commands: Constructeur de commandes (CmdBuilder, cmd, shell) et
  fabrique d'options partagées (CmdFactory, CmdFactoryOptions)
- config: Chargement des options de fabrique (TOML, JSON, .env)
- logging: Gestion des logs (Logger, FileLogger)
- errors: Exceptions de la bibliothèque
"""

__version__ = "1.0.0"

from cmd_builder.logging import Logger, FileLogger
from cmd_builder.errors import (
    CommandError,
    CommandStateError,
    CommandAlreadyStartedError,
    CommandNotStartedError,
    ConfigurationError,
    FileConfigurationError,
)
from cmd_builder.commands import (
    Command,
    CmdBuilder,
    cmd,
    shell,
    CmdFactory,
    CmdFactoryOptions,
    new_factory,
    SHELLS,
    shell_args,
    MultiWriter,
    CommandFormatter,
    PlainCommandFormatter,
)
from cmd_builder.config import (
    ConfigLoader,
    FileConfigLoader,
    FactorySettings,
    FactoryOptionsLoader,
)

__all__ = [
    # Logging
    "Logger",
    "FileLogger",
    # Errors
    "CommandError",
    "CommandStateError",
    "CommandAlreadyStartedError",
    "CommandNotStartedError",
    "ConfigurationError",
    "FileConfigurationError",
    # Commands - Spécification
    "Command",
    # Commands - Constructeur
    "CmdBuilder",
    "cmd",
    "shell",
    # Commands - Fabrique
    "CmdFactory",
    "CmdFactoryOptions",
    "new_factory",
    # Commands - Shell
    "SHELLS",
    "shell_args",
    # Commands - Flux et formateurs
    "MultiWriter",
    "CommandFormatter",
    "PlainCommandFormatter",
    # Config
    "ConfigLoader",
    "FileConfigLoader",
    "FactorySettings",
    "FactoryOptionsLoader",
]
