"""A parameter value: simple text or an RFC 8187 compound ("extended") value."""

from typing import TypeAlias

from .Compound import Compound
from .Simple import Simple

Value: TypeAlias = Simple | Compound


def value_text(value: Value) -> str:
    """Return the text a value carries, without charset or language."""
    if isinstance(value, Compound):
        return value.value
    return value.text
