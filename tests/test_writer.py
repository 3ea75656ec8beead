"""Tests pour MultiWriter."""

import io
from unittest.mock import MagicMock

import pytest

from cmd_builder.commands import MultiWriter


class TestMultiWriter:
    """Tests pour la sortie composite MultiWriter."""

    def test_bytes_vers_sorties_mixtes(self):
        """Test que chaque sortie reçoit le type attendu."""
        text, binary = io.StringIO(), io.BytesIO()
        writer = MultiWriter(text, binary)

        assert writer.write(b"abc") == 3
        assert text.getvalue() == "abc"
        assert binary.getvalue() == b"abc"

    def test_str_vers_sortie_binaire(self):
        """Test qu'une str est encodée pour une sortie binaire."""
        binary = io.BytesIO()
        MultiWriter(binary).write("é")
        assert binary.getvalue() == "é".encode("utf-8")

    def test_caractere_coupe_entre_deux_ecritures(self):
        """Test qu'un caractère multi-octets coupé reste intact."""
        text = io.StringIO()
        writer = MultiWriter(text)
        data = "é".encode("utf-8")

        writer.write(data[:1])
        writer.write(data[1:])
        writer.flush()
        assert text.getvalue() == "é"

    def test_ordre_des_ecritures(self):
        """Test que les sorties sont écrites dans l'ordre."""
        calls = []
        first, second = MagicMock(), MagicMock()
        first.write.side_effect = lambda d: calls.append(("first", d))
        second.write.side_effect = lambda d: calls.append(("second", d))

        MultiWriter(first, second).write(b"x")
        assert calls == [("first", b"x"), ("second", b"x")]

    def test_erreur_propagee(self):
        """Test qu'une erreur d'écriture est propagée."""
        failing = MagicMock()
        failing.write.side_effect = OSError("disque plein")
        with pytest.raises(OSError):
            MultiWriter(failing, io.BytesIO()).write(b"x")

    def test_flush(self):
        """Test que flush() vide chaque sortie."""
        sink = MagicMock()
        MultiWriter(sink).flush()
        sink.flush.assert_called_once()
