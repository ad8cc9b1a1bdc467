"""Link params."""

from .Param import Param, quote_string
from .param_from_node import param_from_node

__all__ = ["Param", "param_from_node", "quote_string"]
