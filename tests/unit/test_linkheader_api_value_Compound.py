"""Unit tests for linkheader.api.value display and encodings."""

import pytest

from linkheader.api.value.Compound import Compound
from linkheader.api.value.Encoding import parse_encoding
from linkheader.api.value.Extension import Extension
from linkheader.api.value.Simple import Simple
from linkheader.api.value.Utf8 import Utf8


class TestEncoding:
    """Test charset parsing and display."""

    @pytest.mark.parametrize("charset", ["UTF-8", "utf-8", "Utf-8"])
    def test_utf8_is_case_insensitive(self, charset):
        assert parse_encoding(charset) == Utf8()

    def test_extension_is_lowercased(self):
        assert parse_encoding("ISO-8859-1") == Extension("iso-8859-1")

    def test_display(self):
        assert str(Utf8()) == "UTF-8"
        assert str(Extension("GIB")) == "GIB"


class TestCompoundDisplay:
    """Test the RFC 8187 wire form of compound values."""

    def test_utf8_value_is_percent_encoded(self):
        value = Compound(Utf8(), "en", "GBP (£)")
        assert str(value) == "UTF-8'en'GBP%20(%C2%A3)"

    def test_missing_language_is_empty(self):
        assert str(Compound(Utf8(), None, "€ rates")) == "UTF-8''%E2%82%AC%20rates"

    def test_reserved_characters_encoded(self):
        assert str(Compound(Utf8(), None, 'a"#<>`?{}b')) == "UTF-8''a%22%23%3C%3E%60%3F%7B%7Db"

    def test_percent_and_delimiters_encoded(self):
        assert str(Compound(Utf8(), None, "100%, a;b")) == "UTF-8''100%25%2C%20a%3Bb"

    def test_extension_value_passes_through(self):
        value = Compound(Extension("GIB"), None, "%C0%FF%EE")
        assert str(value) == "GIB''%C0%FF%EE"


class TestSimpleDisplay:
    """Test simple values display verbatim."""

    @pytest.mark.parametrize("text", ["next", "a b c", "GBP (£)", "%20"])
    def test_simple_is_verbatim(self, text):
        assert str(Simple(text)) == text
