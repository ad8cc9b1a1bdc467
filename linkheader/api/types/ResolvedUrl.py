import re
from dataclasses import dataclass
from urllib.parse import urlsplit, urlunsplit

# RFC 3986 section 3.1
SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+\-.]*$")
# Schemes whose empty path normalizes to "/"
HIERARCHICAL_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp", "file"})


@dataclass(frozen=True)
class ResolvedUrl:
    """Strongly typed absolute URL value object.

    Ensures that any instance holds an absolute URL (one with a scheme).
    """

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise TypeError("ResolvedUrl value must be a string")
        if self.normalize(self.value) is None:
            raise ValueError(f"Invalid absolute URL: {self.value}")

    def __str__(self):
        return self.value

    def __repr__(self):
        return f"ResolvedUrl('{self.value}')"

    @staticmethod
    def normalize(text: str) -> str | None:
        """Return the normalized form of an absolute URL, or None if ``text`` is not one.

        The scheme is lower-cased and an empty path on a hierarchical URL
        with an authority becomes "/".
        """
        if any(ch.isspace() or ord(ch) < 0x20 for ch in text):
            return None
        try:
            parts = urlsplit(text)
            # Accessing port validates it
            _ = parts.port
        except ValueError:
            return None

        if not parts.scheme or not SCHEME_PATTERN.match(parts.scheme):
            return None

        scheme = parts.scheme.lower()
        path = parts.path
        if scheme in HIERARCHICAL_SCHEMES and parts.netloc and not path:
            path = "/"
        return urlunsplit((scheme, parts.netloc, path, parts.query, parts.fragment))

    @classmethod
    def parse(cls, text: str) -> "ResolvedUrl | None":
        """Create a ResolvedUrl from text, or None if it is not an absolute URL."""
        normalized = cls.normalize(text)
        if normalized is None:
            return None
        return cls(normalized)
