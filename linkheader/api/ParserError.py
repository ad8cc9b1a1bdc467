"""Base class for link header parsing errors."""


class ParserError(Exception):
    """Raised when a tokenized header cannot be reduced to links."""
