"""Parse HTTP Link headers (RFC 8288) into relation-exploded links."""

from .api.DecodeError import DecodeError
from .api.header.Header import Header
from .api.header.parse import parse
from .api.InvalidRule import InvalidRule
from .api.link.Link import Link
from .api.param.Param import Param
from .api.ParserError import ParserError
from .api.tokenizer.TokenizeError import TokenizeError
from .api.types.Relation import Relation
from .api.types.ResolvedUrl import ResolvedUrl
from .api.types.UriRef import UriRef
from .api.value.Compound import Compound
from .api.value.Encoding import Encoding
from .api.value.Extension import Extension
from .api.value.Simple import Simple
from .api.value.Utf8 import Utf8
from .api.value.Value import Value

__version__ = "0.1.0"

__all__ = [
    "Compound",
    "DecodeError",
    "Encoding",
    "Extension",
    "Header",
    "InvalidRule",
    "Link",
    "Param",
    "ParserError",
    "Relation",
    "ResolvedUrl",
    "Simple",
    "TokenizeError",
    "UriRef",
    "Utf8",
    "Value",
    "parse",
]
