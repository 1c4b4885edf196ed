"""
Module contenant les exceptions personnalisées de simpleini.

Chaque type d'échec (fichier, syntaxe, recherche, conversion) possède
sa propre classe afin que l'appelant puisse brancher sur la cause.
"""
from pathlib import Path
from typing import Optional, Union


class ApplicationError(Exception):
    """Exception de base pour toute la bibliothèque."""
    pass

class ConfigurationError(ApplicationError):
    """Exception de base pour toutes les configurations."""
    pass

class SettingsError(ConfigurationError):
    """Fichier de paramètres illisible ou invalide."""
    pass


class IniError(ConfigurationError):
    """Exception de base pour toutes les erreurs liées aux fichiers INI."""
    pass


class IniFileError(IniError):
    """Fichier INI absent au chargement ou impossible à écrire.

    Attributes:
        path: Chemin du fichier concerné (peut être None).
    """

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class IniParseError(IniError):
    """Ligne significative ne respectant pas la grammaire INI.

    Attributes:
        line: Texte brut de la ligne fautive.
        line_number: Numéro de ligne (1-based) ou None.
        source: Origine du texte (chemin du fichier) ou None.
    """

    def __init__(
        self,
        message: str,
        line: str,
        line_number: Optional[int] = None,
        source: Optional[Union[str, Path]] = None
    ) -> None:
        location = []
        if source is not None:
            location.append(str(source))
        if line_number is not None:
            location.append(f"ligne {line_number}")
        if location:
            message = f"{message} ({', '.join(location)})"
        super().__init__(f"{message} : {line!r}")
        self.line = line
        self.line_number = line_number
        self.source = source


class IniLookupError(IniError, LookupError):
    """Section ou clé absente du document en mémoire."""
    pass


class SectionNotFoundError(IniLookupError):
    """La section demandée n'existe pas."""

    def __init__(self, section: str) -> None:
        super().__init__(f"Aucune section '{section}'")
        self.section = section


class KeyNotFoundError(IniLookupError):
    """La clé demandée n'existe pas dans la section."""

    def __init__(self, section: str, key: str) -> None:
        super().__init__(f"Aucune clé '{key}' dans la section '{section}'")
        self.section = section
        self.key = key


class IniConversionError(IniError, ValueError):
    """La valeur ne peut pas être entièrement convertie vers le type cible.

    Attributes:
        value: Chaîne d'origine.
        target_type: Type demandé.
    """

    def __init__(self, value: str, target_type: type) -> None:
        super().__init__(
            f"Échec de conversion de la valeur '{value}' "
            f"vers {target_type.__name__}"
        )
        self.value = value
        self.target_type = target_type


class IniValidationError(IniError, ValueError):
    """Nom de section, clé ou valeur impossible à représenter en INI."""
    pass
