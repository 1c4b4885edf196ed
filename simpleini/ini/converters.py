"""Conversions typées strictes des valeurs INI.

Les valeurs sont toujours stockées sous forme de chaînes ; get_as() n'est
qu'une vue. Chaque type cible possède sa propre règle : la chaîne entière
doit être consommée, sinon IniConversionError est levée.

Types supportés : int, float, str, bool.
"""

import re
from abc import ABC, abstractmethod
from typing import Any

from simpleini.errors.exceptions import IniConversionError

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|[+-]?(?:inf|infinity|nan)",
    re.IGNORECASE,
)

TRUE_WORDS = frozenset({"1", "true", "yes", "on"})
FALSE_WORDS = frozenset({"0", "false", "no", "off"})


class ValueConverter(ABC):
    """Interface pour un convertisseur chaîne -> type cible."""

    target_type: type = object

    @abstractmethod
    def convert(self, value: str) -> Any:
        """Convertit la chaîne entière.

        Raises:
            IniConversionError: Si la chaîne n'est pas entièrement valide.
        """
        pass

    def _fail(self, value: str) -> IniConversionError:
        return IniConversionError(value, self.target_type)


class IntConverter(ValueConverter):
    """Entier décimal signé, sans espace ni séparateur '_'."""

    target_type = int

    def convert(self, value: str) -> int:
        if not _INT_RE.fullmatch(value):
            raise self._fail(value)
        return int(value)


class FloatConverter(ValueConverter):
    """Flottant décimal (exposant optionnel), inf ou nan."""

    target_type = float

    def convert(self, value: str) -> float:
        if not _FLOAT_RE.fullmatch(value):
            raise self._fail(value)
        return float(value)


class StrConverter(ValueConverter):
    target_type = str

    def convert(self, value: str) -> str:
        return value


class BoolConverter(ValueConverter):
    """Booléen : 1/true/yes/on ou 0/false/no/off, sans casse."""

    target_type = bool

    def convert(self, value: str) -> bool:
        word = value.lower()
        if word in TRUE_WORDS:
            return True
        if word in FALSE_WORDS:
            return False
        raise self._fail(value)


CONVERTERS: dict[type, ValueConverter] = {
    converter.target_type: converter
    for converter in (IntConverter(), FloatConverter(),
                      StrConverter(), BoolConverter())
}


def convert_value(value: str, target_type: type) -> Any:
    """Convertit une valeur INI vers l'un des types supportés.

    Args:
        value: Valeur brute (déjà trimée).
        target_type: int, float, str ou bool.

    Returns:
        La valeur convertie.

    Raises:
        TypeError: Si le type cible n'est pas supporté.
        IniConversionError: Si la conversion échoue.
    """
    converter = CONVERTERS.get(target_type)
    if converter is None:
        supported = ", ".join(t.__name__ for t in CONVERTERS)
        raise TypeError(
            f"Type cible non supporté : {target_type!r} "
            f"(types supportés : {supported})"
        )
    return converter.convert(value)
