from ..InvalidRule import InvalidRule
from ..tokenizer.Node import Node
from ..tokenizer.Rule import Rule
from ..value.decode_value import decode_value
from ..value.Value import Value
from .Param import Param

VALUE_RULES = (Rule.TOKEN_VALUE, Rule.QUOTED_VALUE, Rule.EXT_VALUE)


def param_from_node(node: Node) -> Param:
    """Build a Param from a tokenized param node.

    Raises:
        InvalidRule: If the node is not a param node.
        DecodeError: If its extended value does not decode.
    """
    if node.rule is not Rule.PARAM:
        raise InvalidRule(Rule.PARAM, node.rule)

    name = ""
    value: Value | None = None

    for child in node.children:
        if child.rule is Rule.NAME:
            name = child.text
        elif child.rule in VALUE_RULES:
            value = decode_value(child)
        else:
            raise RuntimeError(f"Unexpected rule {child.rule} inside param")

    return Param(name, value)
