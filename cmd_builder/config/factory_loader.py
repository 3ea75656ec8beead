"""Chargeur de configuration pour CmdFactoryOptions.

Example:
    Création d'une fabrique depuis un fichier TOML:

        loader = FactoryOptionsLoader("config/app.toml")
        factory = CmdFactory(loader.load())
"""

from pathlib import Path
from typing import Any, List, Optional

from cmd_builder.commands.factory import CmdFactoryOptions
from cmd_builder.config.loader import (
    ConfigFileLoader,
    ConfigLoader,
    validate_with_schema,
)
from cmd_builder.config.schema import FactorySettings
from cmd_builder.errors.exceptions import FileConfigurationError
from cmd_builder.logging.base import Logger


class FactoryOptionsLoader(ConfigFileLoader[CmdFactoryOptions]):
    """Lit la section [factory] et produit un CmdFactoryOptions.

    Un env_file relatif est résolu par rapport au répertoire du
    fichier de configuration.

    Attributes:
        DEFAULT_SECTION: Nom de la section par défaut ("factory").
    """

    DEFAULT_SECTION: str = "factory"

    def __init__(
        self,
        config_path: str | Path,
        config_loader: ConfigLoader | None = None
    ) -> None:
        super().__init__(config_path, config_loader)

    def load(
        self,
        section: str | None = None,
        logger: Optional[Logger] = None,
    ) -> CmdFactoryOptions:
        """Charge et retourne un CmdFactoryOptions.

        Args:
            section: Nom de la section (défaut: "factory").
            logger: Logger placé dans les options.

        Returns:
            Options avec dir et env renseignés.

        Raises:
            KeyError: Si la section n'existe pas.
            pydantic.ValidationError: Si la section est invalide.
            FileConfigurationError: Si env_file est introuvable.
        """
        section_name = section or self.DEFAULT_SECTION
        data: dict[str, Any] = self._get_section(section_name)
        settings: FactorySettings = validate_with_schema(
            data, FactorySettings
        )

        env: List[str] = []
        if settings.env_file:
            env.extend(self._read_env_file(settings.env_file))
        env.extend(f"{key}={value}" for key, value in settings.env.items())

        if logger:
            logger.log_info(
                f"Options de fabrique chargées depuis [{section_name}] "
                f"({len(env)} variable(s))"
            )

        return CmdFactoryOptions(
            dir=settings.dir,
            env=tuple(env),
            logger=logger,
        )

    def _read_env_file(self, env_file: str) -> List[str]:
        """Lit un fichier .env via python-dotenv.

        Les clés sans valeur (ligne "CLE" seule) sont ignorées.

        Raises:
            FileConfigurationError: Si le fichier n'existe pas.
        """
        from dotenv import dotenv_values

        path = Path(env_file)
        if not path.is_absolute():
            path = self._config_dir / path
        if not path.exists():
            raise FileConfigurationError(
                f"Fichier .env introuvable : {path}"
            )
        return [
            f"{key}={value}"
            for key, value in dotenv_values(path).items()
            if value is not None
        ]
