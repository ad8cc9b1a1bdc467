from dataclasses import dataclass


@dataclass(frozen=True)
class UriRef:
    """Link target as written in the header.

    The text is kept opaque: it is neither validated nor normalized.
    """

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise TypeError("UriRef value must be a string")

    def __str__(self):
        return self.value

    def __repr__(self):
        return f"UriRef('{self.value}')"
