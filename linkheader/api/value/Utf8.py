from dataclasses import dataclass


@dataclass(frozen=True)
class Utf8:
    """The UTF-8 character encoding of an extended value.

    RFC 8187 section 3.2.1: producers MUST use UTF-8.
    """

    def __str__(self):
        return "UTF-8"
