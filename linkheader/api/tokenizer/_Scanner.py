"""Position-tracking regex scanner."""

import re

from .TokenizeError import TokenizeError


class _Scanner:
    """Consumes a string by anchored regex matches, left to right."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def scan(self, pattern: re.Pattern[str]) -> re.Match[str] | None:
        """Match ``pattern`` at the current position and advance past it."""
        match = pattern.match(self.text, self.pos)
        if match:
            self.pos = match.end()
        return match

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def error(self, message: str) -> TokenizeError:
        return TokenizeError(message, self.text, self.pos)
