"""
Module contenant les exceptions personnalisées de cmd_builder.

Les erreurs de création de processus (OSError) et les codes retour
non nuls (subprocess.CalledProcessError) ne sont jamais encapsulés :
seules les erreurs propres à la bibliothèque sont définies ici.
"""


class CommandError(Exception):
    """Exception de base pour toutes les erreurs de cmd_builder."""
    pass


class CommandStateError(CommandError):
    """Exception de base pour les mauvais usages du cycle de vie."""
    pass


class CommandAlreadyStartedError(CommandStateError):
    """La commande a déjà été lancée une fois."""
    pass


class CommandNotStartedError(CommandStateError):
    """Attente d'une commande qui n'a jamais été lancée."""
    pass


class ConfigurationError(CommandError):
    """Exception de base pour toutes les configurations."""
    pass


class FileConfigurationError(ConfigurationError):
    """Fichier référencé par la configuration absent ou illisible."""
    pass
