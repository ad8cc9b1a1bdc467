from dataclasses import dataclass


@dataclass(frozen=True)
class Relation:
    """A single link relation type, e.g. ``next``.

    RFC 8288 requires a link to have a direct relation type. Reverse relations
    (``rev``) are kept as link params but not handled as relation types.
    """

    value: str

    def __str__(self):
        return self.value

    def __repr__(self):
        return f"Relation('{self.value}')"
