"""Filtrage des lignes significatives d'un fichier INI.

Une ligne est significative si, telle quelle (sans aucun trim) :
- elle n'est pas vide ;
- elle ne commence ni par ';' ni par '#' ;
- elle contient au moins un caractère autre que l'espace.

Seul l'espace ' ' compte comme blanc : une ligne composée uniquement de
tabulations est significative et sera rejetée par le parser.
"""

from collections.abc import Iterable, Iterator

COMMENT_PREFIXES = (";", "#")


def is_meaningful(line: str) -> bool:
    """Indique si une ligne brute doit être transmise au parser.

    Args:
        line: Ligne brute, sans son retour à la ligne.

    Returns:
        True si la ligne n'est ni vide, ni un commentaire, ni blanche.
    """
    if not line or line.startswith(COMMENT_PREFIXES):
        return False
    return bool(line.strip(" "))


def iter_meaningful(lines: Iterable[str]) -> Iterator[tuple[int, str]]:
    """Parcourt les lignes significatives avec leur numéro (1-based).

    Le '\\n' final éventuel de chaque ligne est retiré avant le test.
    """
    for number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\n")
        if is_meaningful(line):
            yield number, line


def filter_lines(lines: Iterable[str]) -> list[str]:
    """Retourne la sous-séquence ordonnée des lignes significatives."""
    return [line for _, line in iter_meaningful(lines)]
