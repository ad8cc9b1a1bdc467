from dataclasses import dataclass


@dataclass(frozen=True)
class Simple:
    """A token or quoted-string parameter value, used verbatim."""

    text: str

    def __str__(self):
        return self.text
