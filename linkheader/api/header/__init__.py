"""Link header assembly."""

from .assemble_header import assemble_header
from .Header import Header
from .parse import parse

__all__ = ["Header", "assemble_header", "parse"]
