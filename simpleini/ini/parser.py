"""Parser de sections INI.

Le parser consomme les lignes significatives (voir filter.py) et les
classe, dans cet ordre, en :

1. en-tête de section : la ligne commence par '[' ;
2. paire clé/valeur : la ligne contient au moins un '=' ;
3. ligne invalide : tout le reste, qui interrompt le chargement.

Le contenu situé avant le premier en-tête est ignoré. Une section
répétée remplace la précédente ; une clé répétée garde la dernière
valeur.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Optional, Union

from simpleini.errors.exceptions import IniFileError, IniParseError
from simpleini.ini.filter import iter_meaningful
from simpleini.ini.section import IniSection
from simpleini.ini.syntax import (
    is_key_value,
    is_section_header,
    parse_key_value,
    parse_section_name,
    strip_spaces,
)
from simpleini.logging.base import Logger

__all__ = [
    "IniParser",
    "parse_key_value",
    "parse_section_name",
    "strip_spaces",
]


class IniParser:
    """Construit le dictionnaire {nom: IniSection} depuis des lignes brutes.

    Attributes:
        logger: Logger optionnel (injection de dépendance).
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger = logger

    def parse_lines(
        self,
        lines: Iterable[str],
        source: Optional[Union[str, Path]] = None
    ) -> dict[str, IniSection]:
        """Analyse une séquence de lignes brutes.

        Args:
            lines: Lignes brutes (avec ou sans '\\n' final).
            source: Origine des lignes, reportée dans les erreurs.

        Returns:
            Dictionnaire {nom de section: IniSection}.

        Raises:
            IniParseError: Si une ligne significative ne respecte pas
                la grammaire. Rien n'est retourné dans ce cas.
        """
        sections: dict[str, IniSection] = {}
        current: Optional[str] = None
        items: dict[str, str] = {}

        for number, line in iter_meaningful(lines):
            if is_section_header(line):
                if current is not None:
                    self._commit(sections, current, items)
                current = self._section_name(line, number, source)
                items = {}
            elif is_key_value(line):
                key, value = parse_key_value(line)
                if not key:
                    raise IniParseError(
                        "Clé vide", line, number, source
                    )
                if current is None:
                    continue
                items[key] = value
            else:
                raise IniParseError(
                    "Ligne invalide", line, number, source
                )

        if current is not None:
            self._commit(sections, current, items)

        if self.logger:
            self.logger.log_debug(
                f"{len(sections)} section(s) analysée(s)"
                + (f" depuis {source}" if source is not None else "")
            )
        return sections

    def parse_string(
        self,
        text: str,
        source: Optional[Union[str, Path]] = None
    ) -> dict[str, IniSection]:
        """Analyse un texte INI complet.

        Les fins de ligne '\\r\\n' et '\\r' sont traitées comme '\\n', comme
        à la lecture d'un fichier.
        """
        text = text.replace("\r\n", "\n").replace("\r", "\n")
        return self.parse_lines(text.split("\n"), source)

    def parse_file(
        self,
        path: Union[str, Path],
        encoding: str = "latin-1"
    ) -> dict[str, IniSection]:
        """Lit puis analyse un fichier INI.

        Args:
            path: Chemin du fichier.
            encoding: Encodage du fichier.

        Raises:
            IniFileError: Si le fichier n'existe pas ou est illisible.
            IniParseError: Si une ligne est invalide.
        """
        path = Path(path)
        if not path.is_file():
            raise IniFileError(f"Fichier non trouvé : {path}", path)

        try:
            with open(path, "r", encoding=encoding) as f:
                lines = f.readlines()
        except (OSError, UnicodeDecodeError) as e:
            raise IniFileError(f"Lecture impossible de {path} : {e}", path) from e

        return self.parse_lines(lines, path)

    def _section_name(
        self,
        line: str,
        number: int,
        source: Optional[Union[str, Path]]
    ) -> str:
        name = parse_section_name(line)
        if name is None:
            raise IniParseError(
                "En-tête de section sans ']'", line, number, source
            )
        if not strip_spaces(name):
            raise IniParseError(
                "Nom de section vide", line, number, source
            )
        return name

    def _commit(
        self,
        sections: dict[str, IniSection],
        name: str,
        items: dict[str, str]
    ) -> None:
        if name in sections and self.logger:
            self.logger.log_warning(
                f"Section [{name}] dupliquée : la dernière occurrence l'emporte"
            )
        sections[name] = IniSection._from_parsed(name, items)
