"""Vérification d'un fichier INI contre une section attendue."""

from pathlib import Path
from typing import Optional, Union

from simpleini.config.settings import IniSettings
from simpleini.ini.document import IniDocument
from simpleini.ini.section import IniSection
from simpleini.integrity.base import IniSectionIntegrityChecker
from simpleini.logging.base import Logger


class SimpleIniSectionChecker(IniSectionIntegrityChecker):
    """Charge le fichier avec IniDocument et compare clé par clé.

    Les clés présentes dans le fichier mais absentes de la section
    attendue ne sont pas considérées comme des écarts.
    """

    def __init__(
        self,
        settings: Optional[IniSettings] = None,
        logger: Optional[Logger] = None
    ) -> None:
        self.settings = settings
        self.logger = logger

    def verify(
        self,
        file_path: Union[str, Path],
        section: IniSection
    ) -> bool:
        """Vérifie la section dans le fichier.

        Raises:
            IniFileError: Si le fichier n'existe pas.
            IniParseError: Si le fichier est mal formé.
        """
        doc = IniDocument(file_path, settings=self.settings)

        if not doc.has_section(section.name):
            self._log_mismatch(f"Section [{section.name}] absente de {file_path}")
            return False

        actual = doc[section.name]
        ok = True
        for key, expected in section.items():
            if key not in actual:
                self._log_mismatch(f"[{section.name}] {key} absente")
                ok = False
            elif actual[key] != expected:
                self._log_mismatch(
                    f"[{section.name}] {key} = {actual[key]!r}, "
                    f"attendu {expected!r}"
                )
                ok = False

        if ok and self.logger:
            self.logger.log_info(
                f"Section [{section.name}] conforme dans {file_path}."
            )
        return ok

    def _log_mismatch(self, message: str) -> None:
        if self.logger:
            self.logger.log_warning(message)
