"""Module ini : lecture, consultation et écriture de fichiers INI.

Dialecte supporté :
- commentaires sur une ligne entière commençant par ';' ou '#' ;
- en-tête de section `[nom]` (le texte après ']' est ignoré) ;
- paires `cle = valeur`, découpées au premier '=' et trimées des espaces ;
- lignes vides ou composées d'espaces ignorées.

Classes principales:
    - IniDocument: Document complet lié à un fichier
    - IniSection: Section nommée en lecture seule
    - IniParser: Analyse de lignes brutes en sections
    - IniSerializer: Rendu des sections en texte INI
    - IniConfig: Interface abstraite d'un document

Fonctions utilitaires:
    - is_meaningful, filter_lines, iter_meaningful: Filtre de lignes
    - strip_spaces, parse_section_name, parse_key_value: Découpage
    - convert_value: Conversion typée stricte

Example:
    >>> from simpleini.ini import IniDocument
    >>> doc = IniDocument("./test.ini")
    >>> doc["abc"].get_as("val2", int)
"""

from simpleini.ini.base import IniConfig
from simpleini.ini.converters import (
    BoolConverter,
    FloatConverter,
    IntConverter,
    StrConverter,
    ValueConverter,
    convert_value,
)
from simpleini.ini.document import IniDocument
from simpleini.ini.filter import filter_lines, is_meaningful, iter_meaningful
from simpleini.ini.parser import IniParser
from simpleini.ini.section import IniSection
from simpleini.ini.serializer import IniSerializer
from simpleini.ini.syntax import (
    parse_key_value,
    parse_section_name,
    strip_spaces,
)

__all__ = [
    # Interfaces abstraites
    "IniConfig",
    "ValueConverter",
    # Implémentations
    "IniDocument",
    "IniSection",
    "IniParser",
    "IniSerializer",
    "IntConverter",
    "FloatConverter",
    "StrConverter",
    "BoolConverter",
    # Fonctions utilitaires
    "is_meaningful",
    "iter_meaningful",
    "filter_lines",
    "strip_spaces",
    "parse_section_name",
    "parse_key_value",
    "convert_value",
]
