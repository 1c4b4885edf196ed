#!/usr/bin/env python3
"""Tests unitaires pour le module errors."""

import unittest
from unittest.mock import MagicMock, patch

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


class TestExceptionHierarchy(unittest.TestCase):
    """Tests de la hiérarchie d'exceptions."""

    def test_ini_errors_are_configuration_errors(self):
        for error_type in (IniFileError, IniParseError, IniLookupError,
                           IniConversionError, IniValidationError):
            self.assertTrue(issubclass(error_type, IniError))
            self.assertTrue(issubclass(error_type, ConfigurationError))
            self.assertTrue(issubclass(error_type, ApplicationError))

    def test_error_kinds_are_distinct(self):
        kinds = [IniFileError, IniParseError, IniLookupError, IniConversionError]
        for kind in kinds:
            for other in kinds:
                if kind is not other:
                    self.assertFalse(issubclass(kind, other))

    def test_builtin_bases(self):
        self.assertTrue(issubclass(SectionNotFoundError, LookupError))
        self.assertTrue(issubclass(KeyNotFoundError, LookupError))
        self.assertTrue(issubclass(IniConversionError, ValueError))
        self.assertTrue(issubclass(IniValidationError, ValueError))

    def test_parse_error_message(self):
        error = IniParseError("Ligne invalide", "oops", 4, "/etc/app.ini")
        self.assertEqual(
            str(error), "Ligne invalide (/etc/app.ini, ligne 4) : 'oops'"
        )
        self.assertEqual(error.line, "oops")
        self.assertEqual(error.line_number, 4)

    def test_lookup_error_attributes(self):
        error = KeyNotFoundError("abc", "val")
        self.assertEqual(error.section, "abc")
        self.assertEqual(error.key, "val")
        self.assertEqual(SectionNotFoundError("abc").section, "abc")


class TestConsoleErrorHandler(unittest.TestCase):
    """Tests pour ConsoleErrorHandler."""

    def setUp(self):
        self.handler = ConsoleErrorHandler()

    @patch("builtins.print")
    def test_handle_parse_error(self, mock_print):
        """Vérifie le message pour IniParseError."""
        error = IniParseError("Ligne invalide", "oops")
        self.handler.handle(error)
        mock_print.assert_any_call(f"\n🛑 IniParseError: {error}")
        mock_print.assert_any_call(
            "\n🔧 Solution : Corrigez la ligne indiquée (section [nom] ou clé = valeur)."
        )

    @patch("builtins.print")
    def test_handle_file_error(self, mock_print):
        self.handler.handle(IniFileError("absent"))
        mock_print.assert_any_call(
            "\n🔧 Solution : Vérifiez que le fichier existe et que vous avez les droits."
        )

    @patch("builtins.print")
    def test_subclass_uses_parent_solution(self, mock_print):
        """SectionNotFoundError hérite de la solution de IniLookupError."""
        self.handler.handle(SectionNotFoundError("abc"))
        mock_print.assert_any_call(
            "\n🔧 Solution : Vérifiez le nom de la section et de la clé demandées."
        )

    @patch("builtins.print")
    def test_custom_solutions(self, mock_print):
        handler = ConsoleErrorHandler(solutions={SettingsError: "Relisez le TOML."})
        handler.handle(SettingsError("invalide"))
        mock_print.assert_any_call("\n🔧 Solution : Relisez le TOML.")

    @patch("builtins.print")
    def test_handle_unknown_error(self, mock_print):
        self.handler.handle(RuntimeError("boom"))
        mock_print.assert_any_call("\n💥 Erreur inattendue: boom")
        mock_print.assert_any_call("Type: RuntimeError")


class TestLoggerErrorHandler(unittest.TestCase):
    """Tests pour LoggerErrorHandler."""

    def setUp(self):
        self.logger = MagicMock()
        self.handler = LoggerErrorHandler(self.logger)

    def test_known_error(self):
        self.handler.handle(IniFileError("absent"))
        self.logger.log_error.assert_called_once_with("IniFileError: absent")

    def test_parse_error_logs_raw_line(self):
        self.handler.handle(IniParseError("Ligne invalide", "\tbad"))
        self.logger.log_debug.assert_called_once_with(
            "Ligne fautive brute : '\\tbad'"
        )

    def test_unknown_error(self):
        self.handler.handle(ValueError("x"))
        self.logger.log_error.assert_called_once_with(
            "Erreur inattendue: ValueError: x"
        )


class TestErrorHandlerChain(unittest.TestCase):
    """Tests pour ErrorHandlerChain."""

    def test_broadcast(self):
        first = MagicMock(spec=ErrorHandler)
        second = MagicMock(spec=ErrorHandler)
        chain = ErrorHandlerChain().add_handler(first).add_handler(second)
        error = IniError("x")
        chain.handle(error)
        first.handle.assert_called_once_with(error)
        second.handle.assert_called_once_with(error)

    @patch("sys.exit")
    def test_handle_and_exit(self, mock_exit):
        handler = MagicMock(spec=ErrorHandler)
        chain = ErrorHandlerChain([handler])
        chain.handle_and_exit(IniError("x"), exit_code=3)
        handler.handle.assert_called_once()
        mock_exit.assert_called_once_with(3)

    def test_chain_is_a_handler(self):
        """Une chaîne peut être imbriquée ou injectée comme handler unique."""
        inner = MagicMock(spec=ErrorHandler)
        outer = ErrorHandlerChain([ErrorHandlerChain([inner])])
        self.assertIsInstance(outer, ErrorHandler)
        outer.handle(IniError("x"))
        inner.handle.assert_called_once()


class TestReporting(unittest.TestCase):
    """Tests pour le gestionnaire de contexte reporting."""

    def test_reports_then_reraises(self):
        handler = MagicMock(spec=ErrorHandler)
        error = IniFileError("absent")
        with self.assertRaises(IniFileError) as ctx:
            with reporting(handler):
                raise error
        self.assertIs(ctx.exception, error)
        handler.handle.assert_called_once_with(error)

    def test_ignores_other_error_types(self):
        handler = MagicMock(spec=ErrorHandler)
        with self.assertRaises(KeyError):
            with reporting(handler, (IniError,)):
                raise KeyError("x")
        handler.handle.assert_not_called()

    def test_without_handler(self):
        with self.assertRaises(IniParseError):
            with reporting(None):
                raise IniParseError("Ligne invalide", "oops")

    def test_no_error(self):
        handler = MagicMock(spec=ErrorHandler)
        with reporting(handler):
            pass
        handler.handle.assert_not_called()


if __name__ == "__main__":
    unittest.main()
