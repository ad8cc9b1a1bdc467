"""Grammar rule tags carried by tokenizer nodes."""

from enum import Enum


class Rule(Enum):
    """Tag identifying which grammar rule produced a node."""

    HEADER = "header"
    LINK = "link"
    TARGET = "target"
    PARAM = "param"
    NAME = "name"
    TOKEN_VALUE = "token_value"
    QUOTED_VALUE = "quoted_value"
    EXT_VALUE = "ext_value"
    ENCODING = "encoding"
    LANGUAGE = "language"
    STAR_VALUE = "star_value"
    EOI = "EOI"

    def __str__(self) -> str:
        return self.value
