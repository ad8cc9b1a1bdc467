"""Tokenizer syntax error."""


class TokenizeError(ValueError):
    """Raised when header text does not match the Link header grammar."""

    def __init__(self, message: str, text: str, position: int):
        self.text = text
        self.position = position
        super().__init__(f"{message} at position {position}: {text[position : position + 20]!r}")
