from collections.abc import Callable

from ..param.Param import Param
from .LinkBuilder import LinkBuilder

RESERVED_PARAMS: dict[str, Callable[[LinkBuilder, Param], None]] = {
    "rel": LinkBuilder.set_rel,
    "anchor": LinkBuilder.set_anchor,
    "title": LinkBuilder.set_title,
}


def reduce_param(builder: LinkBuilder, param: Param) -> None:
    """Feed one param into a builder, dispatching on its case-insensitive name.

    Reserved names go through their precedence rules; every other param is
    appended as-is, keeping arrival order and duplicates.
    """
    handler = RESERVED_PARAMS.get(param.name.lower())
    if handler is None:
        builder.add_param(param)
    else:
        handler(builder, param)
