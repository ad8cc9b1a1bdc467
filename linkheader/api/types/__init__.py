"""Value types shared across the link header API."""

from .Relation import Relation
from .ResolvedUrl import ResolvedUrl
from .UriRef import UriRef

__all__ = ["Relation", "ResolvedUrl", "UriRef"]
