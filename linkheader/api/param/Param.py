import re
from dataclasses import dataclass

from ..value.Compound import Compound
from ..value.Value import Value

TOKEN_PATTERN = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")


@dataclass(frozen=True)
class Param:
    """A link param pair.

    A param has three types of value: token, quoted text or compound (RFC 8187).
    The first two are represented by ``Simple`` and the latter by ``Compound``.

    ``rel=next`` is ``Param("rel", Simple("next"))`` and
    ``title*=utf-8'ca'%C3%A0bac`` is
    ``Param("title", Compound(Utf8(), "ca", "àbac"))``. A bare ``; foo`` has
    no value at all.
    """

    name: str
    value: Value | None = None

    def __str__(self):
        if self.value is None:
            return self.name
        if isinstance(self.value, Compound):
            return f"{self.name}*={self.value}"
        return f"{self.name}={quote_string(self.value.text)}"


def quote_string(text: str) -> str:
    """Render text as an RFC 9110 quoted-string."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
