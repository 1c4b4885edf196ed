"""
    LoggerErrorHandler
"""
from simpleini.errors.base import ErrorHandler
from simpleini.errors.exceptions import ApplicationError, IniParseError
from simpleini.logging.base import Logger


class LoggerErrorHandler(ErrorHandler):
    """Handler pour logger les erreurs.

    Enregistre les erreurs via le Logger injecté au constructeur.
    """

    def __init__(self,
                 logger: Logger,
                 base_error_type: type[Exception] = ApplicationError
                 ) -> None:
        """Initialise le handler avec un logger.

        Args:
            logger: Instance de Logger pour l'enregistrement des erreurs.
            base_error_type: Classe de base des erreurs connues.
        """
        self.logger = logger
        self.base_error_type = base_error_type

    def handle(self, error: Exception) -> None:
        """Log l'erreur avec différents niveaux selon la gravité.

        Args:
            error: L'exception à logger.
        """
        if isinstance(error, self.base_error_type):
            self.logger.log_error(f"{type(error).__name__}: {str(error)}")
            if isinstance(error, IniParseError):
                self.logger.log_debug(f"Ligne fautive brute : {error.line!r}")
        else:
            self.logger.log_error(
                f"Erreur inattendue: {type(error).__name__}: {str(error)}"
            )
