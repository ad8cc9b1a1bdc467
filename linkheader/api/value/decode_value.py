from ..InvalidRule import InvalidRule
from ..tokenizer.Node import Node
from ..tokenizer.Rule import Rule
from .decode_extended_value import decode_extended_parts
from .Simple import Simple
from .Value import Value


def decode_value(node: Node) -> Value:
    """Decode a tokenized parameter value node.

    Token and quoted-string values become Simple values as-is; extended
    values are decoded per RFC 8187.

    Raises:
        InvalidRule: If the node is not a value node.
        DecodeError: If a UTF-8 extended value is not valid UTF-8.
    """
    if node.rule in (Rule.TOKEN_VALUE, Rule.QUOTED_VALUE):
        return Simple(node.text)

    if node.rule is not Rule.EXT_VALUE:
        raise InvalidRule(Rule.EXT_VALUE, node.rule)

    parts = {child.rule: child.text for child in node.children}
    return decode_extended_parts(
        parts.get(Rule.ENCODING, ""),
        parts.get(Rule.LANGUAGE, ""),
        parts.get(Rule.STAR_VALUE, ""),
    )
