from dataclasses import dataclass

from ..param.Param import Param
from ..types.Relation import Relation
from ..types.ResolvedUrl import ResolvedUrl
from ..types.UriRef import UriRef
from ..value.Simple import Simple
from ..value.Value import Value


@dataclass(frozen=True)
class Link:
    """A link to a target resource with at most one relation type.

    ``context`` is the resolved ``anchor`` when one composed, otherwise the
    base URL the header was parsed against (if any).
    """

    target: UriRef
    context: ResolvedUrl | None = None
    relation: Relation | None = None
    title: Value | None = None
    params: tuple[Param, ...] = ()

    def __str__(self):
        parts = [f"<{self.target}>"]
        if self.relation is not None:
            parts.append(str(Param("rel", Simple(str(self.relation)))))
        if self.context is not None:
            parts.append(str(Param("anchor", Simple(str(self.context)))))
        if self.title is not None:
            parts.append(str(Param("title", self.title)))
        parts.extend(str(param) for param in self.params)
        return "; ".join(parts)
