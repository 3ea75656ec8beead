"""Tests pour le module config."""

import json
from unittest.mock import MagicMock

import pytest
from pydantic import BaseModel, ValidationError

from cmd_builder.commands import CmdFactoryOptions
from cmd_builder.config import (
    ConfigLoader,
    FactoryOptionsLoader,
    FactorySettings,
    FileConfigLoader,
)
from cmd_builder.errors import FileConfigurationError
from cmd_builder.logging.base import Logger


class SampleConfig(BaseModel):
    """Modele Pydantic de test."""
    name: str
    count: int

    model_config = {"extra": "forbid"}


class TestFileConfigLoader:
    """Tests pour FileConfigLoader."""

    def setup_method(self):
        """Initialise le chargeur pour chaque test."""
        self.loader = FileConfigLoader()

    def test_load_toml(self, tmp_path):
        """Test du chargement d'un fichier TOML."""
        path = tmp_path / "app.toml"
        path.write_text('[factory]\ndir = "/tmp"\n', encoding="utf-8")
        assert self.loader.load(path) == {"factory": {"dir": "/tmp"}}

    def test_load_json(self, tmp_path):
        """Test du chargement d'un fichier JSON."""
        path = tmp_path / "app.json"
        path.write_text(json.dumps({"name": "x"}), encoding="utf-8")
        assert self.loader.load(str(path)) == {"name": "x"}

    def test_fichier_absent(self, tmp_path):
        """Test qu'un fichier absent lève FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            self.loader.load(tmp_path / "absent.toml")

    def test_extension_non_supportee(self, tmp_path):
        """Test qu'une extension inconnue lève ValueError."""
        path = tmp_path / "app.yaml"
        path.write_text("a: 1", encoding="utf-8")
        with pytest.raises(ValueError):
            self.loader.load(path)

    def test_schema_valide(self, tmp_path):
        """Test de la validation par un modèle Pydantic."""
        path = tmp_path / "app.json"
        path.write_text(json.dumps({"name": "x", "count": 2}))
        result = self.loader.load(path, schema=SampleConfig)

        assert isinstance(result, SampleConfig)
        assert result.count == 2

    def test_schema_donnees_invalides(self, tmp_path):
        """Test que des données invalides lèvent ValidationError."""
        path = tmp_path / "app.json"
        path.write_text(json.dumps({"name": "x", "count": "pas_un_int"}))
        with pytest.raises(ValidationError):
            self.loader.load(path, schema=SampleConfig)

    def test_schema_non_basemodel(self, tmp_path):
        """Test qu'un schema non BaseModel lève TypeError."""
        path = tmp_path / "app.json"
        path.write_text("{}")
        with pytest.raises(TypeError):
            self.loader.load(path, schema=dict)


class TestFactorySettings:
    """Tests pour le schéma FactorySettings."""

    def test_valeurs_par_defaut(self):
        """Test des valeurs par défaut."""
        settings = FactorySettings()
        assert settings.dir == ""
        assert settings.env == {}
        assert settings.env_file is None

    def test_champ_inconnu(self):
        """Test qu'un champ inconnu est refusé."""
        with pytest.raises(ValidationError):
            FactorySettings(stdout="console")

    def test_nom_de_variable_invalide(self):
        """Test qu'une clé contenant '=' est refusée."""
        with pytest.raises(ValidationError):
            FactorySettings(env={"A=B": "1"})


class TestFactoryOptionsLoader:
    """Tests pour FactoryOptionsLoader."""

    def _write(self, tmp_path, content, name="app.toml"):
        """Écrit un fichier de configuration et retourne son chemin."""
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    def test_load_dir_et_env(self, tmp_path):
        """Test du chargement de dir et env."""
        path = self._write(
            tmp_path,
            '[factory]\ndir = "/srv"\n\n'
            '[factory.env]\nA = "1"\nB = "deux"\n',
        )
        options = FactoryOptionsLoader(path).load()

        assert isinstance(options, CmdFactoryOptions)
        assert options.dir == "/srv"
        assert options.env == ("A=1", "B=deux")
        assert options.stdout is None

    def test_section_personnalisee(self, tmp_path):
        """Test du chargement d'une autre section."""
        path = self._write(tmp_path, '[git]\ndir = "/src"\n')
        assert FactoryOptionsLoader(path).load("git").dir == "/src"

    def test_section_absente(self, tmp_path):
        """Test qu'une section absente lève KeyError."""
        path = self._write(tmp_path, '[autre]\ndir = "/src"\n')
        with pytest.raises(KeyError):
            FactoryOptionsLoader(path).load()

    def test_env_file_avant_env(self, tmp_path):
        """Test que le fichier .env précède la table env."""
        (tmp_path / ".env").write_text(
            "A=fichier\nC=3\n", encoding="utf-8"
        )
        path = self._write(
            tmp_path,
            '[factory]\nenv_file = ".env"\n\n[factory.env]\nA = "table"\n',
        )
        options = FactoryOptionsLoader(path).load()

        assert options.env == ("A=fichier", "C=3", "A=table")

    def test_env_file_absent(self, tmp_path):
        """Test qu'un .env absent lève FileConfigurationError."""
        path = self._write(
            tmp_path, '[factory]\nenv_file = "absent.env"\n'
        )
        with pytest.raises(FileConfigurationError):
            FactoryOptionsLoader(path).load()

    def test_json(self, tmp_path):
        """Test du chargement depuis JSON."""
        path = self._write(
            tmp_path,
            json.dumps({"factory": {"env": {"X": "1"}}}),
            name="app.json",
        )
        assert FactoryOptionsLoader(path).load().env == ("X=1",)

    def test_logger(self, tmp_path):
        """Test que le logger est placé dans les options et informé."""
        path = self._write(tmp_path, "[factory]\n")
        mock_logger = MagicMock(spec=Logger)
        options = FactoryOptionsLoader(path).load(logger=mock_logger)

        assert options.logger is mock_logger
        mock_logger.log_info.assert_called_once()

    def test_chargeur_injecte(self, tmp_path):
        """Test de l'injection d'un ConfigLoader (DIP)."""
        mock_loader = MagicMock(spec=ConfigLoader)
        mock_loader.load.return_value = {"factory": {"dir": "/opt"}}
        options = FactoryOptionsLoader(
            tmp_path / "virtuel.toml", config_loader=mock_loader
        ).load()

        assert options.dir == "/opt"
