"""API module for linkheader.

Tokenizes Link header text and reduces the token tree to Header, Link and
Param value objects.
"""

__all__ = []
