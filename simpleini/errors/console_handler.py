"""
    ConsoleErrorHandler (messages adaptés aux erreurs INI)
"""
from simpleini.errors.base import ErrorHandler
from simpleini.errors.exceptions import (ApplicationError,
                                         IniConversionError,
                                         IniFileError,
                                         IniLookupError,
                                         IniParseError,
                                         IniValidationError,
                                         SettingsError)


DEFAULT_SOLUTIONS: dict[type[Exception], str] = {
    IniFileError: "Vérifiez que le fichier existe et que vous avez les droits.",
    IniParseError: "Corrigez la ligne indiquée (section [nom] ou clé = valeur).",
    IniLookupError: "Vérifiez le nom de la section et de la clé demandées.",
    IniConversionError: "Vérifiez le format de la valeur dans le fichier.",
    IniValidationError: "Utilisez des noms sans '=', ']' ni retour à la ligne.",
    SettingsError: "Vérifiez votre fichier de paramètres.",
}


class ConsoleErrorHandler(ErrorHandler):
    """Handler pour afficher les erreurs dans la console.

    Distingue les erreurs connues (ApplicationError) des erreurs
    inattendues, et affiche un message de solution adapté au type
    d'erreur.
    """

    def __init__(
        self,
        base_error_type: type[Exception] = ApplicationError,
        solutions: dict[type[Exception], str] | None = None
    ) -> None:
        """Initialise le handler console.

        Args:
            base_error_type: Classe de base pour distinguer erreurs connues/inconnues
                             (défaut: ApplicationError).
            solutions: Dictionnaire {TypeException: "message solution"}
                       fusionné avec les solutions par défaut.
        """
        self.base_error_type = base_error_type
        self.solutions = {**DEFAULT_SOLUTIONS, **(solutions or {})}

    def handle(self, error: Exception) -> None:
        """Affiche l'erreur dans la console avec des messages utilisateur.

        Args:
            error: L'exception à afficher.
        """
        if isinstance(error, self.base_error_type):
            self._handle_known_error(error)
        else:
            self._handle_unknown_error(error)

    def _solution_for(self, error: Exception) -> str:
        """Retourne la solution du type le plus spécifique connu."""
        for error_type in type(error).__mro__:
            if error_type in self.solutions:
                return self.solutions[error_type]
        return "Voir les suggestions ci-dessus."

    def _handle_known_error(self, error: Exception) -> None:
        """Gère les erreurs connues du projet.

        Args:
            error: L'exception métier à traiter.
        """
        print(f"\n🛑 {type(error).__name__}: {str(error)}")
        print(f"\n🔧 Solution : {self._solution_for(error)}")

    def _handle_unknown_error(self, error: Exception) -> None:
        """Gère les erreurs inattendues.

        Args:
            error: L'exception non prévue à afficher.
        """
        print(f"\n💥 Erreur inattendue: {str(error)}")
        print(f"Type: {type(error).__name__}")
        print(
            "\n📋 Cela peut être un bug. Veuillez ouvrir une issue avec ces informations."
        )
