"""Interface abstraite pour la vérification d'intégrité de sections INI."""

from abc import ABC, abstractmethod
from pathlib import Path

from simpleini.ini.section import IniSection


class IniSectionIntegrityChecker(ABC):
    """Vérifie qu'un fichier INI contient les valeurs d'une section attendue.

    On compare un fichier contre un modèle (la section attendue), et non
    deux fichiers entre eux.
    """

    @abstractmethod
    def verify(self, file_path: Path, section: IniSection) -> bool:
        """Vérifie qu'un fichier INI contient les valeurs attendues.

        Args:
            file_path: Chemin du fichier INI à vérifier.
            section: Section portant le nom et les valeurs attendues.

        Returns:
            True si toutes les valeurs correspondent, False sinon.
        """
        ...
