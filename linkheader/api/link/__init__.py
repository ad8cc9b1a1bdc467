"""Links and the reduction of tokenized links into them."""

from .build_links import build_links
from .compose_context import compose_context
from .Link import Link
from .LinkBuilder import BuilderState, LinkBuilder
from .reduce_param import reduce_param
from .resolve_reference import remove_dot_segments, resolve_reference

__all__ = [
    "BuilderState",
    "Link",
    "LinkBuilder",
    "build_links",
    "compose_context",
    "reduce_param",
    "remove_dot_segments",
    "resolve_reference",
]
