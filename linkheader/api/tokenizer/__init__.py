"""Link header tokenizer."""

from .Node import Node
from .Rule import Rule
from .tokenize import tokenize
from .TokenizeError import TokenizeError

__all__ = ["Node", "Rule", "TokenizeError", "tokenize"]
