"""Interface abstraite d'un document INI complet."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from simpleini.ini.section import IniSection


class IniConfig(ABC):
    """Interface pour un fichier de configuration INI complet.

    Représente l'ensemble des sections d'un fichier INI.
    """

    @abstractmethod
    def sections(self) -> list[str]:
        """Retourne les noms de toutes les sections.

        L'ordre n'est pas garanti identique à celui du fichier.
        """
        pass

    @abstractmethod
    def get_section(self, name: str) -> IniSection:
        """Retourne une section par son nom exact.

        Raises:
            SectionNotFoundError: Si la section n'existe pas.
        """
        pass

    @abstractmethod
    def to_ini(self) -> str:
        """Génère le contenu du fichier INI."""
        pass

    @classmethod
    @abstractmethod
    def from_file(cls, path: Union[str, Path]) -> "IniConfig":
        """Charge une configuration depuis un fichier INI.

        Raises:
            IniFileError: Si le fichier n'existe pas.
            IniParseError: Si le fichier est mal formé.
        """
        pass
