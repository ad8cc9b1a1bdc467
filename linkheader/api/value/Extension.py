from dataclasses import dataclass


@dataclass(frozen=True)
class Extension:
    """An extension (mime-charset) encoding, reserved by RFC 8187 for future use.

    Values under an extension encoding are never decoded.
    """

    charset: str

    def __str__(self):
        return self.charset
