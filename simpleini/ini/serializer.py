"""Sérialisation d'un ensemble de sections au format INI."""

from collections.abc import Mapping
from pathlib import Path
from typing import Optional, Union

from simpleini.config.settings import IniSettings
from simpleini.errors.exceptions import IniFileError
from simpleini.ini.filter import COMMENT_PREFIXES
from simpleini.ini.section import IniSection
from simpleini.ini.syntax import SECTION_OPEN
from simpleini.logging.base import Logger


class IniSerializer:
    """Rend des sections en texte INI relisible par IniParser.

    Format produit :

        [nom]
        cle = valeur

        [autre]
        ...

    Seul le contenu (sections, clés, valeurs) est garanti après relecture,
    pas la mise en forme exacte du fichier d'origine.
    """

    def __init__(
        self,
        settings: Optional[IniSettings] = None,
        logger: Optional[Logger] = None
    ) -> None:
        self.settings = settings or IniSettings()
        self.logger = logger

    def _format_key(self, key: str) -> str:
        # une clé commençant par '[', ';' ou '#' serait relue comme
        # en-tête ou commentaire ; l'espace ajouté est retiré au trim
        if key.startswith((SECTION_OPEN, *COMMENT_PREFIXES)):
            return f" {key}"
        return key

    def render_section(self, section: IniSection) -> str:
        lines = [f"[{section.name}]"]
        lines.extend(
            f"{self._format_key(key)}{self.settings.separator}{value}"
            for key, value in section.items()
        )
        return "\n".join(lines) + "\n"

    def render(self, sections: Mapping[str, IniSection]) -> str:
        """Rend toutes les sections, séparées par des lignes vides.

        Le nom utilisé est la clé du dictionnaire.

        Returns:
            Texte INI terminé par un '\\n', ou "" sans section.
        """
        spacing = "\n" * self.settings.section_spacing
        return spacing.join(
            self.render_section(section.copy(name))
            for name, section in sections.items()
        )

    def write(
        self,
        path: Union[str, Path],
        sections: Mapping[str, IniSection]
    ) -> None:
        """Crée ou tronque le fichier puis y écrit les sections.

        Le texte est encodé avant l'ouverture : un échec d'encodage laisse
        le fichier existant intact.

        Raises:
            IniFileError: Si le texte ne peut pas être encodé ou si le
                fichier ne peut pas être écrit.
        """
        path = Path(path)

        try:
            data = self.render(sections).encode(self.settings.encoding)
        except UnicodeEncodeError as e:
            raise IniFileError(
                f"Encodage {self.settings.encoding} impossible pour {path} : {e}",
                path
            ) from e

        try:
            with open(path, "wb") as f:
                f.write(data)
        except OSError as e:
            raise IniFileError(f"Écriture impossible de {path} : {e}", path) from e

        if self.logger:
            self.logger.log_info(
                f"Fichier {path} écrit avec succès ({len(sections)} section(s))."
            )
