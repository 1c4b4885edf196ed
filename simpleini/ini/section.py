"""Section INI : un nom et un ensemble clé -> valeur.

Les clés et valeurs sont stockées comme chaînes trimées des espaces
(les tabulations sont conservées). Une section est en lecture seule
après construction ; IniDocument en garde sa propre copie.
"""

from collections.abc import Iterator, Mapping
from typing import Any, Optional

from simpleini.errors.exceptions import IniValidationError, KeyNotFoundError
from simpleini.ini.converters import convert_value
from simpleini.ini.syntax import strip_spaces


def validate_section_name(name: str) -> str:
    """Vérifie qu'un nom de section peut être écrit puis relu à l'identique.

    Le nom n'est pas trimé : il est conservé tel qu'entre '[' et ']'.

    Raises:
        IniValidationError: Nom vide, contenant ']' ou un retour à la ligne.
    """
    name = str(name)
    if not strip_spaces(name):
        raise IniValidationError("Le nom de section ne peut pas être vide")
    if "]" in name or "\n" in name or "\r" in name:
        raise IniValidationError(
            f"Nom de section invalide : {name!r} (']' ou retour à la ligne)"
        )
    return name


def _normalize_item(key: Any, value: Any) -> tuple[str, str]:
    key = strip_spaces(str(key))
    value = strip_spaces(str(value))
    if not key:
        raise IniValidationError("Une clé ne peut pas être vide")
    if "=" in key or "\n" in key or "\r" in key:
        raise IniValidationError(
            f"Clé invalide : {key!r} ('=' ou retour à la ligne)"
        )
    if "\n" in value or "\r" in value:
        raise IniValidationError(
            f"La valeur de '{key}' contient un retour à la ligne"
        )
    return key, value


class IniSection:
    """Section nommée d'un fichier INI.

    Example:
        >>> section = IniSection("test", {"abc": "123", "123": "50"})
        >>> section["abc"]
        '123'
        >>> section.get_as("123", int)
        50
    """

    def __init__(
        self,
        name: str,
        contents: Optional[Mapping[Any, Any]] = None
    ) -> None:
        """Initialise la section.

        Args:
            name: Nom de la section.
            contents: Paires clé/valeur, converties en chaînes trimées.

        Raises:
            IniValidationError: Si le nom, une clé ou une valeur ne peut
                pas être représenté en INI.
        """
        self._name = validate_section_name(name)
        self._contents: dict[str, str] = dict(
            _normalize_item(k, v) for k, v in (contents or {}).items()
        )

    @classmethod
    def _from_parsed(cls, name: str, contents: dict[str, str]) -> "IniSection":
        """Construit une section depuis le parser, déjà normalisée."""
        section = cls.__new__(cls)
        section._name = name
        section._contents = dict(contents)
        return section

    @property
    def name(self) -> str:
        return self._name

    def get(self, key: str) -> str:
        """Retourne la valeur de la clé.

        Raises:
            KeyNotFoundError: Si la clé n'existe pas.
        """
        try:
            return self._contents[key]
        except KeyError:
            raise KeyNotFoundError(self._name, key) from None

    def __getitem__(self, key: str) -> str:
        return self.get(key)

    def get_as(self, key: str, target_type: type) -> Any:
        """Retourne la valeur convertie vers int, float, str ou bool.

        Raises:
            KeyNotFoundError: Si la clé n'existe pas.
            IniConversionError: Si la valeur n'est pas entièrement valide.
            TypeError: Si le type cible n'est pas supporté.
        """
        return convert_value(self.get(key), target_type)

    def empty(self) -> bool:
        """True si la section ne contient aucune clé."""
        return not self._contents

    def get_map(self) -> dict[str, str]:
        """Retourne une copie du dictionnaire clé -> valeur."""
        return dict(self._contents)

    to_dict = get_map

    @classmethod
    def from_dict(cls, name: str, data: Mapping[Any, Any]) -> "IniSection":
        return cls(name, data)

    def copy(self, name: Optional[str] = None) -> "IniSection":
        """Copie la section, éventuellement sous un autre nom."""
        if name is None:
            return self._from_parsed(self._name, self._contents)
        return self._from_parsed(validate_section_name(name), self._contents)

    def items(self):
        return self._contents.items()

    def keys(self):
        return self._contents.keys()

    def __contains__(self, key: object) -> bool:
        return key in self._contents

    def __iter__(self) -> Iterator[str]:
        return iter(self._contents)

    def __len__(self) -> int:
        return len(self._contents)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IniSection):
            return NotImplemented
        return self._name == other._name and self._contents == other._contents

    __hash__ = None

    def __repr__(self) -> str:
        return f"IniSection({self._name!r}, {self._contents!r})"
