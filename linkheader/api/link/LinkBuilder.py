"""Accumulates the state of one link and explodes it into Link objects."""

import logging
from enum import Enum

from ..param.Param import Param
from ..types.Relation import Relation
from ..types.ResolvedUrl import ResolvedUrl
from ..types.UriRef import UriRef
from ..value.Compound import Compound
from ..value.Simple import Simple
from ..value.Value import value_text
from .compose_context import compose_context
from .Link import Link

logger = logging.getLogger(__name__)


class BuilderState(Enum):
    EMPTY = "empty"
    ACCUMULATING = "accumulating"
    BUILT = "built"


class LinkBuilder:
    """Builder for the links described by one link element of a header.

    The reserved params (``rel``, ``anchor``, ``title``) follow a
    first-occurrence-wins rule. Any occurrence that does not take effect is
    kept as an ordinary param, so nothing a sender wrote is dropped.

    ``build()`` may be called once. It yields one Link per relation type.
    """

    def __init__(self, base: ResolvedUrl | None = None):
        self.base = base
        self.state = BuilderState.EMPTY
        self._target: UriRef | None = None
        self._context = base
        self._relations: list[str] | None = None
        self._anchor_seen = False
        self._title: Param | None = None
        self._params: list[Param] = []

    def _accumulate(self) -> None:
        if self.state is BuilderState.BUILT:
            raise RuntimeError("LinkBuilder has already been built")
        self.state = BuilderState.ACCUMULATING

    def set_target(self, target: str | UriRef) -> None:
        self._accumulate()
        if self._target is not None:
            raise RuntimeError(f"Link target already set to {self._target}")
        self._target = target if isinstance(target, UriRef) else UriRef(target)

    def set_rel(self, param: Param) -> None:
        """Use the first valued ``rel`` as the relation source.

        A blank value still consumes the source and yields no relation types.
        """
        self._accumulate()
        if self._relations is None and param.value is not None:
            self._relations = [token for token in value_text(param.value).split(" ") if token]
            return
        logger.debug(f"Keeping extra rel as param: {param}")
        self.add_param(param)

    def set_anchor(self, param: Param) -> None:
        """Compose the context from the first valued ``anchor``."""
        self._accumulate()
        if not self._anchor_seen and param.value is not None:
            self._anchor_seen = True
            context = compose_context(self.base, value_text(param.value))
            if context is not None:
                self._context = context
                return
            logger.debug(f"Anchor did not resolve against base {self.base}: {param}")
        self.add_param(param)

    def set_title(self, param: Param) -> None:
        """Track the active title; ``title*`` takes precedence over ``title``."""
        self._accumulate()
        if param.value is None:
            self.add_param(param)
            return

        if self._title is None:
            self._title = param
            return

        if isinstance(self._title.value, Simple) and isinstance(param.value, Compound):
            logger.debug(f"Demoting title superseded by title*: {self._title}")
            self._params.append(self._title)
            self._title = param
            return

        logger.debug(f"Keeping extra title as param: {param}")
        self.add_param(param)

    def add_param(self, param: Param) -> None:
        self._accumulate()
        self._params.append(param)

    def build(self) -> list[Link]:
        """Produce one Link per relation type, or a single Link without one.

        Raises:
            RuntimeError: If already built or no target was set.
        """
        if self.state is BuilderState.BUILT:
            raise RuntimeError("LinkBuilder has already been built")
        if self._target is None:
            raise RuntimeError("Cannot build a link without a target")
        self.state = BuilderState.BUILT

        title = self._title.value if self._title is not None else None
        relations: list[Relation | None] = [Relation(r) for r in self._relations or []] or [None]

        return [
            Link(
                target=self._target,
                context=self._context,
                relation=relation,
                title=title,
                params=tuple(self._params),
            )
            for relation in relations
        ]
