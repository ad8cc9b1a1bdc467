"""Link header tokenizer (RFC 8288 section 3)."""

import re

from .Node import Node
from .Rule import Rule
from ._Scanner import _Scanner

# RFC 9110 token characters
TCHAR = r"[!#$%&'*+\-.^_`|~0-9A-Za-z]"

OWS_PATTERN = re.compile(r"[ \t]*")
LIST_SEP_PATTERN = re.compile(r"[ \t]*,[ \t]*")
PARAM_SEP_PATTERN = re.compile(r"[ \t]*;[ \t]*")
EQUALS_PATTERN = re.compile(r"[ \t]*=[ \t]*")
TARGET_PATTERN = re.compile(r"<([^>]*)>")
TOKEN_PATTERN = re.compile(rf"{TCHAR}+")
QUOTED_PATTERN = re.compile(r'"((?:[^"\\]|\\.)*)"')
QUOTED_PAIR_PATTERN = re.compile(r"\\(.)")
# RFC 8187 section 3.2.1: charset "'" [ language ] "'" value-chars
EXT_VALUE_PATTERN = re.compile(
    r"""
    ([!#$%&+\-^_`{}~0-9A-Za-z]+)'  # charset
    ([0-9A-Za-z\-]*)'  # language, may be empty
    ((?:%[0-9A-Fa-f]{2}|[!#$&'()*+\-./:=@\[\\\]^_`|~0-9A-Za-z])*)  # value-chars, as display leaves them
    """,
    re.VERBOSE,
)


def tokenize(text: str, rule: Rule = Rule.HEADER) -> Node:
    """Tokenize ``text`` into a node tree rooted at ``rule``.

    ``rule`` may be HEADER (the default), LINK or PARAM; the latter two
    tokenize a single list element or parameter.

    Raises:
        TokenizeError: If the text does not match the grammar.
        ValueError: If ``rule`` is not a valid entry rule.
    """
    scanner = _Scanner(text)

    if rule is Rule.HEADER:
        return _header(scanner)

    entry = {Rule.LINK: _link, Rule.PARAM: _param}.get(rule)
    if entry is None:
        raise ValueError(f"Cannot start tokenizing at rule {rule}")

    scanner.scan(OWS_PATTERN)
    node = entry(scanner)
    scanner.scan(OWS_PATTERN)
    if not scanner.at_end():
        raise scanner.error("Unexpected trailing input")
    return node


def _header(scanner: _Scanner) -> Node:
    children: list[Node] = []
    scanner.scan(OWS_PATTERN)
    while not scanner.at_end():
        # Empty list elements are allowed by the list rule
        if scanner.scan(LIST_SEP_PATTERN):
            continue
        children.append(_link(scanner))
        scanner.scan(OWS_PATTERN)
        if not scanner.at_end() and not scanner.scan(LIST_SEP_PATTERN):
            raise scanner.error("Expected ',' between links")

    children.append(Node(Rule.EOI, ""))
    return Node(Rule.HEADER, scanner.text, tuple(children))


def _link(scanner: _Scanner) -> Node:
    start = scanner.pos
    target = scanner.scan(TARGET_PATTERN)
    if not target:
        raise scanner.error("Expected '<' URI-Reference '>'")

    children = [Node(Rule.TARGET, target.group(1))]
    while scanner.scan(PARAM_SEP_PATTERN):
        # Tolerate empty params such as ";;" or a trailing ";"
        if TOKEN_PATTERN.match(scanner.text, scanner.pos):
            children.append(_param(scanner))

    return Node(Rule.LINK, scanner.text[start : scanner.pos], tuple(children))


def _param(scanner: _Scanner) -> Node:
    start = scanner.pos
    name_match = scanner.scan(TOKEN_PATTERN)
    if not name_match:
        raise scanner.error("Expected parameter name")

    name = name_match.group(0)
    is_extended = len(name) > 1 and name.endswith("*")
    if is_extended:
        name = name[:-1]

    children = [Node(Rule.NAME, name)]
    if scanner.scan(EQUALS_PATTERN):
        children.append(_ext_value(scanner) if is_extended else _value(scanner))
    elif is_extended:
        raise scanner.error(f"Expected '=' and extended value after '{name}*'")

    return Node(Rule.PARAM, scanner.text[start : scanner.pos], tuple(children))


def _value(scanner: _Scanner) -> Node:
    quoted = scanner.scan(QUOTED_PATTERN)
    if quoted:
        return Node(Rule.QUOTED_VALUE, QUOTED_PAIR_PATTERN.sub(r"\1", quoted.group(1)))

    token = scanner.scan(TOKEN_PATTERN)
    if token:
        return Node(Rule.TOKEN_VALUE, token.group(0))

    raise scanner.error("Expected token or quoted-string value")


def _ext_value(scanner: _Scanner) -> Node:
    match = scanner.scan(EXT_VALUE_PATTERN)
    if not match:
        raise scanner.error("Expected extended value charset'language'value")

    return Node(
        Rule.EXT_VALUE,
        match.group(0),
        (
            Node(Rule.ENCODING, match.group(1)),
            Node(Rule.LANGUAGE, match.group(2)),
            Node(Rule.STAR_VALUE, match.group(3)),
        ),
    )
