"""Interfaces de traitement des erreurs et diffusion vers plusieurs handlers.

Les erreurs de la bibliothèque sont toujours relevées vers l'appelant ;
un handler ne fait que les signaler (console, log) au passage.
"""

import sys
from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Optional

from simpleini.errors.exceptions import ApplicationError


class ErrorHandler(ABC):
    """Interface de base pour les handlers d'erreurs.

    Chaque implémentation définit une façon de signaler une erreur
    (affichage console, logging, etc.).
    """

    @abstractmethod
    def handle(self, error: Exception) -> None:
        """Signale une erreur.

        Args:
            error: L'exception à signaler.
        """
        pass


class ErrorHandlerChain(ErrorHandler):
    """Diffuse chaque erreur à tous les handlers, dans l'ordre d'ajout.

    Étant elle-même un ErrorHandler, la chaîne peut être injectée
    partout où un handler unique est attendu (ex: IniDocument).

    Example:
        >>> chain = ErrorHandlerChain([ConsoleErrorHandler()])
        >>> chain.add_handler(LoggerErrorHandler(logger))
        >>> doc = IniDocument("app.ini", error_handler=chain)
    """

    def __init__(self, handlers: list[ErrorHandler] | None = None):
        self.handlers: list[ErrorHandler] = list(handlers or [])

    def add_handler(self, handler: ErrorHandler) -> "ErrorHandlerChain":
        """Ajoute un handler et retourne la chaîne."""
        self.handlers.append(handler)
        return self

    def handle(self, error: Exception) -> None:
        for handler in self.handlers:
            handler.handle(error)

    def handle_and_exit(self, error: Exception, exit_code: int = 1) -> None:
        """Signale l'erreur puis termine le programme.

        Args:
            error: L'exception à signaler avant la sortie.
            exit_code: Code de sortie du programme (défaut: 1).
        """
        self.handle(error)
        sys.exit(exit_code)


@contextmanager
def reporting(
    handler: Optional[ErrorHandler],
    error_types: tuple[type[Exception], ...] = (ApplicationError,)
) -> Iterator[None]:
    """Transmet au handler les erreurs levées dans le bloc, puis les relève.

    Args:
        handler: Handler à notifier, ou None pour ne rien faire.
        error_types: Types d'erreurs à signaler.
    """
    try:
        yield
    except error_types as error:
        if handler is not None:
            handler.handle(error)
        raise
