"""Fixtures partagées : fichiers INI de référence."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from simpleini.logging import Logger


TEST_INI = (
    ";hello\n"
    "[abc]\n"
    "val1 = hello with trailing    \n"
    "val2 =    3 with leading\n\n\n"
    "val3 = nice\n"
    "val4 = 3\n"
    "      \n"
    "[test section]\n"
    "testValue =    hey\n"
    "with space = 123\n"
    "normal = yep\n"
    "[empty section]\n"
    "[with comment] # hello\n"
    "hey = aloha\n"
    "; comment\n"
)

# "      [test_section]" n'est pas un en-tête : la ligne commence par
# des espaces et ne contient pas de '='.
FAULTY_INI = (
    ";hello\n"
    "[abc]\n"
    "val1 = hello with trailing    \n"
    "val2 =    3 with leading\n\n\n"
    "val3 = nice\n"
    "      "
    "[test_section]\n"
    "testValue =    hey\n"
    "with space = 123\n"
    "normal = yep\n"
    "[empty section]\n"
    "; comment\n"
)


@pytest.fixture
def test_ini(tmp_path) -> Path:
    """Crée le fichier INI de référence."""
    path = tmp_path / "test.ini"
    path.write_text(TEST_INI, encoding="latin-1")
    return path


@pytest.fixture
def faulty_ini(tmp_path) -> Path:
    """Crée un fichier INI contenant une ligne invalide."""
    path = tmp_path / "faulty.ini"
    path.write_text(FAULTY_INI, encoding="latin-1")
    return path


@pytest.fixture
def mock_logger():
    """Logger factice pour vérifier les appels."""
    return MagicMock(spec=Logger)
