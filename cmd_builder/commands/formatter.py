"""Formateurs des messages de log émis lors des lancements de commandes.

Classes :
    CommandFormatter : Interface abstraite de formatage.
    PlainCommandFormatter : Texte brut compatible fichiers de log.

Example :
    Sortie pour un lancement dans /tmp :
        Exécution : bash -c 'echo hi' (dir: /tmp)
"""

import shlex
from abc import ABC, abstractmethod
from typing import List


class CommandFormatter(ABC):
    """Interface abstraite pour formater les messages de commande."""

    @abstractmethod
    def format_start(self, command: List[str], cwd: str) -> str:
        """Formate le message de lancement d'un processus.

        Args:
            command: Commande sous forme de liste.
            cwd: Répertoire de travail ("" pour le répertoire courant).

        Returns:
            Message formaté prêt à l'affichage.
        """
        pass

    @abstractmethod
    def format_failure(
        self, command: List[str], error: BaseException
    ) -> str:
        """Formate le message d'échec (création ou code retour).

        Args:
            command: Commande sous forme de liste.
            error: Exception remontée au code appelant.

        Returns:
            Message formaté prêt à l'affichage.
        """
        pass


class PlainCommandFormatter(CommandFormatter):
    """Formateur texte brut pour les logs fichier.

    La commande est rendue avec shlex.join : le message peut être
    copié tel quel dans un terminal.
    """

    def format_start(self, command: List[str], cwd: str) -> str:
        """Formate le lancement, avec le répertoire s'il est défini."""
        message = f"Exécution : {shlex.join(command)}"
        if cwd:
            message += f" (dir: {cwd})"
        return message

    def format_failure(
        self, command: List[str], error: BaseException
    ) -> str:
        """Formate l'échec avec le type et le message de l'erreur."""
        return (
            f"Échec : {shlex.join(command)} : "
            f"{type(error).__name__}: {error}"
        )
