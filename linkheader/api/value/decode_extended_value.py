"""Decode RFC 8187 extended values."""

from urllib.parse import unquote_to_bytes

from ..DecodeError import DecodeError
from .Compound import Compound
from .Encoding import parse_encoding
from .Utf8 import Utf8


def decode_extended_value(text: str) -> Compound:
    """Decode a raw ``charset'language'value`` string.

    Raises:
        DecodeError: If the text lacks the two quote delimiters or the
            UTF-8 payload is not valid UTF-8.
    """
    parts = text.split("'", 2)
    if len(parts) != 3:
        raise DecodeError(text, "expected charset'language'value")
    charset, language, raw = parts
    return decode_extended_parts(charset, language, raw)


def decode_extended_parts(charset: str, language: str, raw: str) -> Compound:
    """Build a Compound from the three already-split parts of an extended value.

    Only UTF-8 payloads are percent-decoded. Any other charset keeps ``raw``
    untouched.

    Raises:
        DecodeError: If the UTF-8 payload does not decode.
    """
    encoding = parse_encoding(charset)

    if isinstance(encoding, Utf8):
        try:
            value = unquote_to_bytes(raw).decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(raw, str(e)) from e
    else:
        value = raw

    return Compound(encoding=encoding, language=language or None, value=value)
