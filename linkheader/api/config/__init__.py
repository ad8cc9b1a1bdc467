"""Parser configuration."""

from .ParserConfig import ParserConfig

__all__ = ["ParserConfig"]
