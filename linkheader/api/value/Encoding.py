"""The character encoding of a compound value.

RFC 8187 Section 3.2.1 names it "charset" and defines it as::

    charset = "UTF-8" / mime-charset
"""

from typing import TypeAlias

from .Extension import Extension
from .Utf8 import Utf8

Encoding: TypeAlias = Utf8 | Extension


def parse_encoding(charset: str) -> Encoding:
    """Parse a charset token case-insensitively.

    Anything other than ``utf-8`` becomes an Extension holding the lower-cased token.
    """
    lowered = charset.lower()
    if lowered == "utf-8":
        return Utf8()
    return Extension(lowered)
