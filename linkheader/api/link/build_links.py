from ..InvalidRule import InvalidRule
from ..param.param_from_node import param_from_node
from ..tokenizer.Node import Node
from ..tokenizer.Rule import Rule
from ..types.ResolvedUrl import ResolvedUrl
from .Link import Link
from .LinkBuilder import LinkBuilder
from .reduce_param import reduce_param


def build_links(node: Node, base: ResolvedUrl | None = None) -> list[Link]:
    """Build the links described by one tokenized link node.

    A ``rel`` naming several relation types yields one Link per type.

    Raises:
        InvalidRule: If the node is not a link node.
        DecodeError: If a param's extended value does not decode.
    """
    if node.rule is not Rule.LINK:
        raise InvalidRule(Rule.LINK, node.rule)

    builder = LinkBuilder(base)

    for child in node.children:
        if child.rule is Rule.TARGET:
            builder.set_target(child.text)
        elif child.rule is Rule.PARAM:
            reduce_param(builder, param_from_node(child))
        else:
            raise RuntimeError(f"Unexpected rule {child.rule} inside link")

    return builder.build()
