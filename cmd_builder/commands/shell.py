"""Sélection du shell du système hôte.

La table SHELLS associe l'identité de la plateforme (sys.platform)
au programme shell et à son option d'exécution de chaîne.

Example:
    Sur Linux :

        from cmd_builder.commands.shell import shell_args

        shell_args("echo hi")
        # Résultat : ["bash", "-c", "echo hi"]
"""

import os
import sys
from typing import Dict, List, Optional, Tuple

SHELLS: Dict[str, Tuple[str, str]] = {
    "linux": ("bash", "-c"),
    "darwin": ("zsh", "-c"),
    "win32": ("powershell", "-Command"),
}


def shell_args(
    arg_string: str, platform: Optional[str] = None
) -> List[str]:
    """Retourne l'argv qui fait exécuter arg_string par le shell de l'OS.

    Toute plateforme absente de SHELLS utilise la variable
    d'environnement SHELL avec l'option -c. Si SHELL n'est pas
    définie, le programme est la chaîne vide et la création du
    processus échouera.

    Args:
        arg_string: Chaîne de commande transmise telle quelle au shell.
        platform: Identité de la plateforme (défaut: sys.platform).

    Returns:
        Liste [programme, option, arg_string].
    """
    if platform is None:
        platform = sys.platform
    program, flag = SHELLS.get(
        platform, (os.environ.get("SHELL", ""), "-c")
    )
    return [program, flag, arg_string]
