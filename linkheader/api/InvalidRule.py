"""Invalid rule error."""

from .ParserError import ParserError
from .tokenizer.Rule import Rule


class InvalidRule(ParserError):
    """Raised when a node's rule does not match what its consumer requires."""

    def __init__(self, expected: Rule, given: Rule):
        self.expected = expected
        self.given = given
        super().__init__(f"Expected a rule of type {expected} but given {given} instead")
