"""Fabrique de CmdBuilder partageant les mêmes options.

Une CmdFactory mémorise des options par défaut (flux, répertoire,
environnement, logger) et les applique à chaque CmdBuilder qu'elle
crée, évitant de répéter la même configuration à chaque appel.

Example:
    Plusieurs commandes dans le même dépôt, avec le même environnement :

        import sys
        from cmd_builder.commands import CmdFactoryOptions, new_factory

        git = new_factory(CmdFactoryOptions(
            dir="/src/projet",
            stdout=sys.stdout,
            env=("GIT_PAGER=cat",),
        ))
        git.cmd("git", "fetch").run()
        sha = git.cmd("git", "rev-parse", "HEAD").output()
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Tuple, Union

from cmd_builder.commands.builder import CmdBuilder, cmd
from cmd_builder.commands.shell import shell_args
from cmd_builder.logging.base import Logger


@dataclass(frozen=True)
class CmdFactoryOptions:
    """Options appliquées à chaque commande d'une CmdFactory.

    Une valeur None (ou "" / vide) laisse le défaut de cmd() en place.

    Attributes:
        stdin: Entrée standard par défaut.
        stdout: Sortie standard par défaut.
        stderr: Sortie d'erreur par défaut.
        dir: Répertoire de travail par défaut.
        env: Entrées "CLE=VALEUR" ajoutées à l'environnement.
        logger: Logger transmis à chaque CmdBuilder.
    """

    stdin: Any = None
    stdout: Any = None
    stderr: Any = None
    dir: str = ""
    env: Tuple[str, ...] = field(default_factory=tuple)
    logger: Optional[Logger] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "env", tuple(self.env))


class CmdFactory:
    """Crée des CmdBuilder préconfigurés avec les mêmes options.

    Les options ne sont jamais modifiées par la fabrique : plusieurs
    threads peuvent créer des commandes depuis la même instance.

    Attributes:
        options: Options appliquées à chaque commande.
    """

    def __init__(self, options: Optional[CmdFactoryOptions] = None) -> None:
        """Initialise la fabrique.

        Args:
            options: Options par défaut (défaut: aucune).
        """
        self.options = options or CmdFactoryOptions()

    def cmd(self, name: str, *args: str) -> CmdBuilder:
        """Crée un CmdBuilder comme cmd(), puis applique les options.

        Args:
            name: Nom ou chemin du programme.
            *args: Arguments, transmis sans modification.

        Returns:
            Un nouveau CmdBuilder préconfiguré.
        """
        options = self.options
        builder = cmd(name, *args, logger=options.logger)

        if options.stdin is not None:
            builder.stdin(options.stdin)
        if options.stdout is not None:
            builder.stdout(options.stdout)
        if options.stderr is not None:
            builder.stderr(options.stderr)
        if options.dir:
            builder.dir(options.dir)
        if options.env:
            builder.env(*options.env)

        return builder

    def shell(self, arg_string: str) -> CmdBuilder:
        """Comme shell(), avec les options de la fabrique.

        Linux: 'bash -c'

        macOS: 'zsh -c'

        Windows: 'powershell -Command'

        Autres: '$SHELL -c'
        """
        return self.cmd(*shell_args(arg_string))

    @classmethod
    def from_config(
        cls,
        config_path: Union[str, Path],
        section: Optional[str] = None,
        logger: Optional[Logger] = None,
    ) -> "CmdFactory":
        """Crée une fabrique depuis un fichier TOML ou JSON.

        Args:
            config_path: Chemin du fichier de configuration.
            section: Section à lire (défaut: "factory").
            logger: Logger transmis aux commandes.

        Returns:
            Une CmdFactory configurée (dir et env uniquement).

        Raises:
            FileNotFoundError: Si le fichier n'existe pas.
            KeyError: Si la section n'existe pas.
        """
        from cmd_builder.config.factory_loader import FactoryOptionsLoader

        options = FactoryOptionsLoader(config_path).load(
            section, logger=logger
        )
        return cls(options)


def new_factory(options: Optional[CmdFactoryOptions] = None) -> CmdFactory:
    """Crée une CmdFactory avec les options données."""
    return CmdFactory(options)
