"""Module de vérification d'intégrité."""

from simpleini.integrity.base import IniSectionIntegrityChecker
from simpleini.integrity.ini_checker import SimpleIniSectionChecker

__all__ = [
    "IniSectionIntegrityChecker",
    "SimpleIniSectionChecker",
]
