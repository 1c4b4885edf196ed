"""Chargement des paramètres depuis un fichier TOML ou JSON."""

import json
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from simpleini.config.settings import IniSettings
from simpleini.errors.exceptions import IniFileError, SettingsError


class SettingsLoader(ABC):
    """
    Interface abstraite pour le chargement des paramètres.

    Permet l'injection de dépendance et facilite les tests
    en permettant de substituer l'implémentation réelle par un mock.
    """

    @abstractmethod
    def load(
        self,
        config_path: Union[str, Path],
        section: Optional[str] = None
    ) -> IniSettings:
        """
        Charge un fichier de paramètres.

        Args:
            config_path: Chemin vers le fichier de paramètres
            section: Table à extraire (ex: "simpleini"). Si None,
                le fichier entier est utilisé.

        Returns:
            Instance validée de IniSettings

        Raises:
            IniFileError: Si le fichier n'existe pas
            SettingsError: Si le format ou le contenu est invalide
        """
        pass


class FileSettingsLoader(SettingsLoader):
    """
    Chargeur de paramètres depuis fichiers.

    Supporte les formats TOML et JSON, détectés automatiquement
    par l'extension du fichier, puis valide le contenu via le
    modèle Pydantic IniSettings.
    """

    def load(
        self,
        config_path: Union[str, Path],
        section: Optional[str] = None
    ) -> IniSettings:
        """
        Charge un fichier de paramètres TOML ou JSON.

        Args:
            config_path: Chemin vers le fichier de paramètres
            section: Table à extraire, ou None pour la racine

        Returns:
            Instance validée de IniSettings

        Raises:
            IniFileError: Si le fichier n'existe pas
            SettingsError: Si l'extension n'est pas supportée, si le
                contenu est mal formé ou ne passe pas la validation
        """
        path = Path(config_path)

        if not path.exists():
            raise IniFileError(
                f"Fichier de paramètres non trouvé: {path}", path
            )

        raw_config = self._read_raw(path)

        if section is not None:
            if section not in raw_config:
                raise SettingsError(
                    f"Section '{section}' non trouvée dans {path}. "
                    f"Sections disponibles: {list(raw_config.keys())}"
                )
            raw_config = raw_config[section]

        try:
            return IniSettings.model_validate(raw_config)
        except ValidationError as e:
            raise SettingsError(f"Paramètres invalides dans {path}: {e}") from e

    @staticmethod
    def _read_raw(path: Path) -> Dict[str, Any]:
        """Lit le fichier brut selon son extension.

        Raises:
            SettingsError: Extension non supportée ou contenu mal formé.
        """
        suffix = path.suffix.lower()

        try:
            if suffix == ".toml":
                with open(path, "rb") as f:
                    return tomllib.load(f)
            if suffix == ".json":
                with open(path, "r", encoding="utf-8") as f:
                    data = json.load(f)
                if not isinstance(data, dict):
                    raise SettingsError(
                        f"Le fichier {path} doit contenir un objet JSON"
                    )
                return data
        except (tomllib.TOMLDecodeError, json.JSONDecodeError) as e:
            raise SettingsError(f"Fichier {path} mal formé: {e}") from e

        raise SettingsError(
            f"Extension non supportée: {suffix}. "
            "Utilisez .toml ou .json"
        )


def load_settings(
    config_path: Union[str, Path],
    section: Optional[str] = None
) -> IniSettings:
    """
    Charge des paramètres (fonction utilitaire).

    Utilise l'implémentation FileSettingsLoader par défaut.

    Args:
        config_path: Chemin vers le fichier de paramètres
        section: Table à extraire, ou None pour la racine

    Returns:
        Instance validée de IniSettings
    """
    return FileSettingsLoader().load(config_path, section)
