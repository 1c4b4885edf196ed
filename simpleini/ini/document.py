"""Document INI : un chemin de fichier et ses sections.

Un document est construit soit depuis un fichier (chargé immédiatement),
soit vide pour être rempli par add_section() puis écrit par write().
"""

from pathlib import Path
from typing import Any, Optional, Union

from simpleini.config.settings import IniSettings
from simpleini.errors.base import ErrorHandler, reporting
from simpleini.errors.exceptions import (
    IniError,
    IniFileError,
    SectionNotFoundError,
)
from simpleini.ini.base import IniConfig
from simpleini.ini.parser import IniParser
from simpleini.ini.section import IniSection, validate_section_name
from simpleini.ini.serializer import IniSerializer
from simpleini.logging.base import Logger


class IniDocument(IniConfig):
    """Lecture, consultation typée et écriture d'un fichier INI.

    Attributes:
        settings: Paramètres de lecture/écriture (IniSettings).
        logger: Logger optionnel.
        error_handler: Handler optionnel (ex: ErrorHandlerChain) notifié
            des échecs de load() et write().

    Example:
        >>> doc = IniDocument("/etc/app.ini")
        >>> doc["abc"]["val1"]
        'hello with trailing'
        >>> doc.get_as("abc", "port", int)
        8080
        >>> empty = IniDocument()
        >>> empty.set_config_file("/tmp/out.ini", autoload=False)
        >>> empty.add_section("test", IniSection("test", {"abc": "123"}))
        >>> empty.write()
    """

    def __init__(
        self,
        config_path: Optional[Union[str, Path]] = None,
        *,
        settings: Optional[IniSettings] = None,
        logger: Optional[Logger] = None,
        error_handler: Optional[ErrorHandler] = None
    ) -> None:
        """Initialise le document, et le charge si un chemin est donné.

        Args:
            config_path: Fichier INI à charger, ou None pour un document vide.
            settings: Paramètres (IniSettings() par défaut).
            logger: Logger optionnel (injection de dépendance).
            error_handler: Handler notifié des erreurs de chargement et
                d'écriture avant qu'elles ne soient relevées.

        Raises:
            IniFileError: Si le fichier n'existe pas.
            IniParseError: Si le fichier contient une ligne invalide.
        """
        self.settings = settings or IniSettings()
        self.logger = logger
        self.error_handler = error_handler
        self._path: Optional[Path] = None
        self._sections: dict[str, IniSection] = {}
        self._parser = IniParser(logger)
        self._serializer = IniSerializer(self.settings, logger)

        if config_path is not None:
            self.set_config_file(config_path, autoload=True)

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        settings: Optional[IniSettings] = None,
        logger: Optional[Logger] = None,
        error_handler: Optional[ErrorHandler] = None
    ) -> "IniDocument":
        return cls(
            path, settings=settings, logger=logger, error_handler=error_handler
        )

    @classmethod
    def from_string(
        cls,
        text: str,
        settings: Optional[IniSettings] = None,
        logger: Optional[Logger] = None
    ) -> "IniDocument":
        """Construit un document non lié à un fichier depuis un texte INI."""
        doc = cls(settings=settings, logger=logger)
        doc._sections = doc._parser.parse_string(text)
        return doc

    # Fichier

    def set_config_file(
        self,
        path: Union[str, Path],
        autoload: bool = True
    ) -> None:
        """Associe le document à un fichier.

        Args:
            path: Nouveau chemin du fichier.
            autoload: Si True, charge immédiatement le fichier ; sinon les
                sections en mémoire sont laissées intactes.

        Raises:
            IniFileError: Si autoload et le fichier est absent.
            IniParseError: Si autoload et le fichier est mal formé. Le
                chemin et les sections précédents sont alors conservés.
        """
        if autoload:
            self._load_from(Path(path))
        else:
            self._path = Path(path)

    def get_config_path(self) -> Optional[Path]:
        return self._path

    def load(self) -> None:
        """(Re)charge le fichier associé.

        En cas d'erreur, les sections en mémoire ne sont pas modifiées.

        Raises:
            IniFileError: Si aucun fichier n'est associé ou s'il est absent.
            IniParseError: Si le fichier contient une ligne invalide.
        """
        self._load_from(self._require_path())

    def _load_from(self, path: Path) -> None:
        # chemin et sections ne changent qu'après une analyse réussie
        with reporting(self.error_handler, (IniError,)):
            sections = self._parser.parse_file(path, self.settings.encoding)
        self._path = path
        self._sections = sections
        if self.logger:
            self.logger.log_info(
                f"Fichier {path} lu avec succès ({len(sections)} section(s))."
            )

    def write(self) -> None:
        """Écrit toutes les sections dans le fichier associé.

        Raises:
            IniFileError: Si aucun fichier n'est associé ou si l'écriture
                échoue.
        """
        with reporting(self.error_handler, (IniError,)):
            self._serializer.write(self._require_path(), self._sections)

    def _require_path(self) -> Path:
        if self._path is None:
            raise IniFileError("Aucun fichier de configuration associé")
        return self._path

    # Consultation

    def get_section(self, name: str) -> IniSection:
        try:
            return self._sections[name]
        except KeyError:
            raise SectionNotFoundError(name) from None

    def __getitem__(self, name: str) -> IniSection:
        return self.get_section(name)

    def get(self, section: str, key: str) -> str:
        """Retourne la valeur brute (trimée) d'une clé.

        Raises:
            SectionNotFoundError: Si la section n'existe pas.
            KeyNotFoundError: Si la clé n'existe pas dans la section.
        """
        return self.get_section(section).get(key)

    def get_as(self, section: str, key: str, target_type: type) -> Any:
        """Retourne une valeur convertie vers int, float, str ou bool.

        Raises:
            SectionNotFoundError: Si la section n'existe pas.
            KeyNotFoundError: Si la clé n'existe pas dans la section.
            IniConversionError: Si la conversion échoue.
        """
        return self.get_section(section).get_as(key, target_type)

    def empty(self, section: str) -> bool:
        """True si la section existe mais ne contient aucune clé."""
        return self.get_section(section).empty()

    def has_section(self, name: str) -> bool:
        return name in self._sections

    def sections(self) -> list[str]:
        return list(self._sections)

    def get_map(self) -> dict[str, IniSection]:
        """Retourne une copie du dictionnaire {nom: IniSection}."""
        return {name: section.copy() for name, section in self._sections.items()}

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Retourne le contenu sous forme {section: {clé: valeur}}."""
        return {
            name: section.get_map() for name, section in self._sections.items()
        }

    def to_ini(self) -> str:
        return self._serializer.render(self._sections)

    # Modification

    def add_section(self, name: str, section: IniSection) -> None:
        """Insère ou remplace une section.

        La section stockée est une copie portant le nom `name`.

        Raises:
            IniValidationError: Si le nom n'est pas représentable en INI.
        """
        name = validate_section_name(name)
        if name in self._sections and self.logger:
            self.logger.log_info(f"Section [{name}] remplacée.")
        self._sections[name] = section.copy(name)

    def __contains__(self, name: object) -> bool:
        return name in self._sections

    def __len__(self) -> int:
        return len(self._sections)

    def __repr__(self) -> str:
        return f"IniDocument({self._path!r}, sections={self.sections()!r})"
