from ..InvalidRule import InvalidRule
from ..link.build_links import build_links
from ..link.Link import Link
from ..tokenizer.Node import Node
from ..tokenizer.Rule import Rule
from ..types.ResolvedUrl import ResolvedUrl
from .Header import Header


def assemble_header(node: Node, base: ResolvedUrl | None = None) -> Header:
    """Reduce a tokenized header node into a Header.

    Raises:
        InvalidRule: If the node is not a header node.
        DecodeError: If any extended value does not decode.
        RuntimeError: If the node tree contains a rule a header cannot hold.
    """
    if node.rule is not Rule.HEADER:
        raise InvalidRule(Rule.HEADER, node.rule)

    links: list[Link] = []

    for child in node.children:
        if child.rule is Rule.LINK:
            links.extend(build_links(child, base))
        elif child.rule is Rule.EOI:
            continue
        else:
            raise RuntimeError(f"Unexpected rule {child.rule} inside header")

    return Header(tuple(links))
