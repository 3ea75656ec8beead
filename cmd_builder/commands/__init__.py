"""Module de construction et d'exécution de commandes système.

Classes et fonctions disponibles :
    Command : Spécification d'un processus, lancée au plus une fois.
    CmdBuilder : Constructeur fluent de commandes.
    cmd : Crée un CmdBuilder pour un programme.
    shell : Crée un CmdBuilder exécuté par le shell de l'OS.
    CmdFactoryOptions : Options par défaut d'une fabrique.
    CmdFactory : Fabrique de CmdBuilder préconfigurés.
    new_factory : Crée une CmdFactory.
    MultiWriter : Sortie composite (écriture en éventail).
    CommandFormatter : Interface abstraite de formatage des logs.
    PlainCommandFormatter : Formatage texte brut.
"""

from cmd_builder.commands.base import Command
from cmd_builder.commands.builder import CmdBuilder, cmd, shell
from cmd_builder.commands.factory import (
    CmdFactory,
    CmdFactoryOptions,
    new_factory,
)
from cmd_builder.commands.formatter import (
    CommandFormatter,
    PlainCommandFormatter,
)
from cmd_builder.commands.shell import SHELLS, shell_args
from cmd_builder.commands.writer import MultiWriter

__all__ = [
    # Spécification
    "Command",
    # Constructeur
    "CmdBuilder",
    "cmd",
    "shell",
    # Fabrique
    "CmdFactory",
    "CmdFactoryOptions",
    "new_factory",
    # Shell
    "SHELLS",
    "shell_args",
    # Flux
    "MultiWriter",
    # Formateurs
    "CommandFormatter",
    "PlainCommandFormatter",
]
