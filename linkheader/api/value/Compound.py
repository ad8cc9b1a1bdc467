from dataclasses import dataclass
from urllib.parse import quote

from .Encoding import Encoding
from .Utf8 import Utf8

# Printable ASCII left unencoded on display. Controls, non-ASCII, space and
# '"', '#', '%', ',', ';', '<', '>', '?', '`', '{', '}' are percent-encoded.
DISPLAY_SAFE = "!$&'()*+-./:=@[\\]^_|~"


@dataclass(frozen=True)
class Compound:
    """An RFC 8187 extended value: character encoding, optional language tag and text.

    ``value`` holds decoded text when the encoding is UTF-8. Under an
    extension encoding it holds the raw text, still percent-encoded.

    Example:
        >>> str(Compound(Utf8(), "en", "GBP (£)"))
        "UTF-8'en'GBP%20(%C2%A3)"
    """

    encoding: Encoding
    language: str | None
    value: str

    def __str__(self):
        if isinstance(self.encoding, Utf8):
            text = quote(self.value, safe=DISPLAY_SAFE, encoding="utf-8")
        else:
            text = self.value
        return f"{self.encoding}'{self.language or ''}'{text}"
