"""
SimpleINI - Lecture et écriture minimalistes de fichiers INI.

Modules disponibles:
- ini: Filtre de lignes, parser, sections, document et sérialisation
- errors: Exceptions distinctes par cause et handlers d'erreurs
- logging: Gestion des logs (Logger, FileLogger)
- config: Paramètres validés (IniSettings) chargés depuis TOML ou JSON
- integrity: Vérification d'un fichier INI contre une section attendue
"""

__version__ = "1.0.0"

from simpleini.logging import Logger, FileLogger
from simpleini.config import (
    IniSettings,
    LoggingSettings,
    SettingsLoader,
    FileSettingsLoader,
    load_settings,
)
from simpleini.errors import (
    ApplicationError,
    ConfigurationError,
    SettingsError,
    IniError,
    IniFileError,
    IniParseError,
    IniLookupError,
    SectionNotFoundError,
    KeyNotFoundError,
    IniConversionError,
    IniValidationError,
    ErrorHandler,
    ErrorHandlerChain,
    reporting,
    ConsoleErrorHandler,
    LoggerErrorHandler,
)
from simpleini.ini import (
    IniConfig,
    IniDocument,
    IniSection,
    IniParser,
    IniSerializer,
    convert_value,
    filter_lines,
    is_meaningful,
)
from simpleini.integrity import (
    IniSectionIntegrityChecker,
    SimpleIniSectionChecker,
)

__all__ = [
    # Logging
    "Logger",
    "FileLogger",
    # Config
    "IniSettings",
    "LoggingSettings",
    "SettingsLoader",
    "FileSettingsLoader",
    "load_settings",
    # Errors
    "ApplicationError",
    "ConfigurationError",
    "SettingsError",
    "IniError",
    "IniFileError",
    "IniParseError",
    "IniLookupError",
    "SectionNotFoundError",
    "KeyNotFoundError",
    "IniConversionError",
    "IniValidationError",
    "ErrorHandler",
    "ErrorHandlerChain",
    "reporting",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    # INI
    "IniConfig",
    "IniDocument",
    "IniSection",
    "IniParser",
    "IniSerializer",
    "convert_value",
    "filter_lines",
    "is_meaningful",
    # Integrity
    "IniSectionIntegrityChecker",
    "SimpleIniSectionChecker",
]
