"""Tokenizer node."""

from dataclasses import dataclass

from .Rule import Rule


@dataclass(frozen=True)
class Node:
    """A tagged node of the tokenized header tree.

    ``text`` is the node's own text with quoting already removed; container
    nodes (header, link, param, ext_value) carry the raw span they cover.
    """

    rule: Rule
    text: str
    children: tuple["Node", ...] = ()
