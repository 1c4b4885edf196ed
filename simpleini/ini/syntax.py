"""Fonctions sans état de découpage et de normalisation des lignes INI.

Seul l'espace ' ' est retiré par le trim : les tabulations sont
volontairement conservées.
"""

from typing import Optional

SECTION_OPEN = "["
SECTION_CLOSE = "]"
KEY_VALUE_DELIMITER = "="


def strip_spaces(text: str) -> str:
    """Retire les espaces ' ' de début et de fin (pas les tabulations)."""
    return text.strip(" ")


def is_section_header(line: str) -> bool:
    return line.startswith(SECTION_OPEN)


def is_key_value(line: str) -> bool:
    return KEY_VALUE_DELIMITER in line and not is_section_header(line)


def parse_section_name(line: str) -> Optional[str]:
    """Extrait le nom entre '[' et le premier ']'.

    Le texte suivant ']' (commentaire en ligne, etc.) est ignoré et le nom
    n'est pas trimé.

    Returns:
        Le nom, ou None si la ligne ne contient pas de ']'.
    """
    end = line.find(SECTION_CLOSE)
    if end == -1:
        return None
    return line[len(SECTION_OPEN):end]


def parse_key_value(line: str) -> tuple[str, str]:
    """Découpe au premier '=' et trime les deux côtés.

    Les '=' suivants font partie de la valeur.
    """
    key, _, value = line.partition(KEY_VALUE_DELIMITER)
    return strip_spaces(key), strip_spaces(value)
