"""Schéma Pydantic de la section [factory] d'un fichier de configuration.

Fichier attendu:

    [factory]
    dir = "/src/projet"
    env_file = ".env"

    [factory.env]
    GIT_PAGER = "cat"
"""

from typing import Dict, Optional

from pydantic import BaseModel, field_validator


class FactorySettings(BaseModel):
    """Options d'une CmdFactory lisibles depuis un fichier.

    Les flux standard ne sont pas configurables par fichier.

    Attributes:
        dir: Répertoire de travail par défaut ("" : hérité).
        env: Variables ajoutées à l'environnement.
        env_file: Fichier .env dont les variables sont ajoutées
            avant celles de env.
    """

    model_config = {"extra": "forbid"}

    dir: str = ""
    env: Dict[str, str] = {}
    env_file: Optional[str] = None

    @field_validator("env")
    @classmethod
    def keys_without_equal_sign(cls, v: Dict[str, str]) -> Dict[str, str]:
        for key in v:
            if not key or "=" in key:
                raise ValueError(
                    f"Nom de variable invalide: {key!r}"
                )
        return v
