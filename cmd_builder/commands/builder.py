"""Constructeur fluent pour configurer et lancer des processus externes.

Ce module fournit la classe CmdBuilder et les fonctions cmd() et
shell() qui la créent. Les méthodes de configuration retournent
l'instance pour le chaînage ; les actions terminales (build, start,
run, output, lines) consomment la commande.

Example:
    Capture de la sortie d'une commande :

        from cmd_builder.commands import cmd

        branch = (
            cmd("git", "rev-parse", "--abbrev-ref", "HEAD")
            .dir("/src/projet")
            .env("GIT_PAGER=cat")
            .output()
        )

    Session interactive via le shell de l'OS :

        shell("ssh serveur").interactive().run()
"""

import io
import os
import subprocess  # nosec B404
import sys
from typing import Any, List, Optional

from cmd_builder.commands.base import Command
from cmd_builder.commands.formatter import (
    CommandFormatter,
    PlainCommandFormatter,
)
from cmd_builder.commands.shell import shell_args
from cmd_builder.commands.writer import MultiWriter
from cmd_builder.logging.base import Logger


class CmdBuilder:
    """Constructeur fluent d'une commande système.

    Aucune validation n'est faite à la configuration : les erreurs
    de création ou d'exécution remontent des actions terminales,
    sans être encapsulées. Un logger optionnel reçoit chaque
    lancement et chaque échec.

    Attributes:
        _command: Spécification en cours de construction.
        _logger: Logger optionnel.
        _formatter: Formateur des messages de log.
    """

    def __init__(
        self,
        command: Command,
        logger: Optional[Logger] = None,
        formatter: Optional[CommandFormatter] = None,
    ) -> None:
        """Initialise le constructeur autour d'une Command.

        Args:
            command: Spécification à configurer.
            logger: Logger optionnel (injection de dépendance).
            formatter: Formateur des messages (défaut: texte brut).
        """
        self._command = command
        self._logger = logger
        self._formatter = formatter or PlainCommandFormatter()

    def dir(self, path: str) -> "CmdBuilder":
        """Définit le répertoire de travail.

        Args:
            path: Répertoire ; "" pour celui du processus appelant.

        Returns:
            L'instance courante pour le chaînage.
        """
        self._command.dir = path
        return self

    def stdout(self, sink: Any) -> "CmdBuilder":
        """Définit la sortie standard (None : périphérique nul)."""
        self._command.stdout = sink
        return self

    def stderr(self, sink: Any) -> "CmdBuilder":
        """Définit la sortie d'erreur (None : périphérique nul)."""
        self._command.stderr = sink
        return self

    def stdin(self, source: Any) -> "CmdBuilder":
        """Définit l'entrée standard.

        Args:
            source: Objet lisible, str ou bytes (envoyés tels quels),
                ou None pour le périphérique nul.

        Returns:
            L'instance courante pour le chaînage.
        """
        if isinstance(source, str):
            source = io.BytesIO(source.encode("utf-8"))
        elif isinstance(source, (bytes, bytearray)):
            source = io.BytesIO(bytes(source))
        self._command.stdin = source
        return self

    def interactive(self) -> "CmdBuilder":
        """Branche les trois flux sur ceux du processus appelant."""
        self._command.stdin = sys.stdin
        self._command.stdout = sys.stdout
        self._command.stderr = sys.stderr
        return self

    def env(self, *variables: str) -> "CmdBuilder":
        """Ajoute des entrées "CLE=VALEUR" à l'environnement.

        Les entrées s'ajoutent à la liste existante, appel après
        appel ; une clé répétée masque les valeurs précédentes.

        Args:
            *variables: Entrées de la forme "CLE=VALEUR".

        Returns:
            L'instance courante pour le chaînage.
        """
        if self._command.env is None:
            self._command.env = []
        self._command.env.extend(variables)
        return self

    def build(self) -> Command:
        """Retourne la Command configurée, sans la lancer.

        Accès bas niveau pour intégrer la commande à un autre code
        de gestion de processus ; préférer run() ou output().
        """
        return self._command

    def _log_start(self) -> None:
        if self._logger:
            self._logger.log_info(
                self._formatter.format_start(
                    self._command.args, self._command.dir
                )
            )

    def _log_failure(self, error: BaseException) -> None:
        if self._logger:
            self._logger.log_error(
                self._formatter.format_failure(self._command.args, error)
            )

    def start(self) -> subprocess.Popen:
        """Lance la commande sans attendre sa fin.

        Returns:
            Le Popen du processus lancé.

        Raises:
            OSError: Si le processus n'a pas pu être créé.
            CommandAlreadyStartedError: Si la commande a déjà été lancée.
        """
        self._log_start()
        try:
            return self._command.start()
        except OSError as e:
            self._log_failure(e)
            raise

    def run(self) -> None:
        """Lance la commande et attend sa fin.

        Raises:
            OSError: Si le processus n'a pas pu être créé.
            subprocess.CalledProcessError: Si le code retour est non nul.
        """
        self._log_start()
        try:
            self._command.run()
        except (OSError, subprocess.CalledProcessError) as e:
            self._log_failure(e)
            raise

    def output(self) -> str:
        """Exécute la commande et retourne sa sortie standard.

        Si une sortie standard a déjà été assignée, elle continue de
        recevoir les données : la capture passe par un MultiWriter
        qui écrit à la fois dans cette sortie et dans un tampon.

        Returns:
            Sortie standard décodée en UTF-8, sans espaces en début
            ni en fin.

        Raises:
            OSError: Si le processus n'a pas pu être créé.
            subprocess.CalledProcessError: Si le code retour est non nul.
        """
        buffer = io.BytesIO()
        if self._command.stdout is not None:
            self._command.stdout = MultiWriter(
                self._command.stdout, buffer
            )
        else:
            self._command.stdout = buffer
        self.run()
        return buffer.getvalue().decode("utf-8", errors="replace").strip()

    def lines(self) -> List[str]:
        """Comme output(), découpé en lignes.

        La sortie est d'abord nettoyée par output(), puis les fins
        de ligne "\\r\\n" sont ramenées à "\\n" avant le découpage :
        "a\\r\\nb\\n" donne ["a", "b"] et une sortie vide [""].

        Returns:
            Liste ordonnée des lignes.
        """
        return self.output().replace("\r\n", "\n").split("\n")


def cmd(
    name: str, *args: str, logger: Optional[Logger] = None
) -> CmdBuilder:
    """Crée un CmdBuilder pour le programme name.

    La sortie d'erreur pointe sur celle du processus appelant et
    l'environnement reprend tout os.environ ; stdin et stdout sont
    sur le périphérique nul tant qu'ils ne sont pas définis.

    Args:
        name: Nom ou chemin du programme.
        *args: Arguments, transmis sans modification.
        logger: Logger optionnel.

    Returns:
        Un nouveau CmdBuilder.
    """
    command = Command(
        [name, *args],
        stderr=sys.stderr,
        env=[f"{key}={value}" for key, value in os.environ.items()],
    )
    return CmdBuilder(command, logger=logger)


def shell(arg_string: str, logger: Optional[Logger] = None) -> CmdBuilder:
    """Comme cmd(), mais arg_string est exécutée par le shell de l'OS.

    Linux: 'bash -c'

    macOS: 'zsh -c'

    Windows: 'powershell -Command'

    Autres: '$SHELL -c'
    """
    return cmd(*shell_args(arg_string), logger=logger)
