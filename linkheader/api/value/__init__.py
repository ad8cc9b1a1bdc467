"""Parameter values and RFC 8187 decoding."""

from .Compound import Compound
from .decode_extended_value import decode_extended_value
from .decode_value import decode_value
from .Encoding import Encoding, parse_encoding
from .Extension import Extension
from .Simple import Simple
from .Utf8 import Utf8
from .Value import Value, value_text

__all__ = [
    "Compound",
    "Encoding",
    "Extension",
    "Simple",
    "Utf8",
    "Value",
    "decode_extended_value",
    "decode_value",
    "parse_encoding",
    "value_text",
]
