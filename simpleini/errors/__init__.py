"""Module de gestion des erreurs."""

from simpleini.errors.base import ErrorHandler, ErrorHandlerChain, reporting
from simpleini.errors.exceptions import (ApplicationError,
                                         ConfigurationError,
                                         SettingsError,
                                         IniError,
                                         IniFileError,
                                         IniParseError,
                                         IniLookupError,
                                         SectionNotFoundError,
                                         KeyNotFoundError,
                                         IniConversionError,
                                         IniValidationError)
from simpleini.errors.console_handler import ConsoleErrorHandler
from simpleini.errors.logger_handler import LoggerErrorHandler


__all__ = [
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
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    "ErrorHandlerChain",
    "reporting",
]
