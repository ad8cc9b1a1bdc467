"""Extended value decode error."""

from .ParserError import ParserError


class DecodeError(ParserError):
    """Raised when a UTF-8 extended value does not percent-decode to valid UTF-8."""

    def __init__(self, raw: str, reason: str):
        self.raw = raw
        self.reason = reason
        super().__init__(f"Invalid UTF-8 in extended value {raw!r}: {reason}")
