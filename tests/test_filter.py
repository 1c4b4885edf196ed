"""Tests unitaires pour le filtre de lignes."""

import pytest

from simpleini.ini.filter import filter_lines, is_meaningful, iter_meaningful


class TestIsMeaningful:
    """Tests pour la fonction is_meaningful."""

    @pytest.mark.parametrize("line", ["", "   ", ";comment", "#comment", "; "])
    def test_rejected_lines(self, line):
        """Lignes vides, blanches et commentaires sont écartées."""
        assert is_meaningful(line) is False

    @pytest.mark.parametrize("line", ["[abc]", "key = value", "  x", "garbage"])
    def test_accepted_lines(self, line):
        """Toute autre ligne est significative."""
        assert is_meaningful(line) is True

    def test_tab_only_line_is_meaningful(self):
        """Une tabulation n'est pas un espace : la ligne passe le filtre."""
        assert is_meaningful("\t") is True
        assert is_meaningful(" \t ") is True

    def test_indented_comment_is_meaningful(self):
        """Le test de commentaire porte sur la ligne brute, sans trim."""
        assert is_meaningful("  ; pas un commentaire") is True


class TestFilterLines:
    """Tests pour filter_lines et iter_meaningful."""

    def test_keeps_order(self):
        lines = ["; c", "[a]", "", "k = v", "   ", "# c", "[b]"]
        assert filter_lines(lines) == ["[a]", "k = v", "[b]"]

    def test_strips_trailing_newline(self):
        """Le '\\n' final des lignes lues depuis un fichier est retiré."""
        assert filter_lines(["[a]\n", "\n", "k = v\n"]) == ["[a]", "k = v"]

    def test_line_numbers(self):
        """Les numéros de ligne sont ceux des lignes physiques."""
        lines = [";hello", "[abc]", "", "k = v"]
        assert list(iter_meaningful(lines)) == [(2, "[abc]"), (4, "k = v")]

    def test_empty_input(self):
        assert filter_lines([]) == []
