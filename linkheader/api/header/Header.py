from collections.abc import Iterator
from dataclasses import dataclass

from ..link.Link import Link


@dataclass(frozen=True)
class Header:
    """A parsed Link header: its links in document order, relations exploded."""

    links: tuple[Link, ...] = ()

    def __iter__(self) -> Iterator[Link]:
        return iter(self.links)

    def __len__(self) -> int:
        return len(self.links)

    def __str__(self):
        return ", ".join(str(link) for link in self.links)
