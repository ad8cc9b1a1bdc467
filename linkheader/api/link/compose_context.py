from ..types.ResolvedUrl import ResolvedUrl
from .resolve_reference import resolve_reference


def compose_context(base: ResolvedUrl | None, anchor_text: str) -> ResolvedUrl | None:
    """Resolve an ``anchor`` parameter into an absolute context URL.

    With a base, the anchor is resolved as a URI reference against it
    (absolute anchors replace the base). Without one, the anchor must already
    be an absolute URL.

    Args:
        base: Absolute URL the header was received from, if known
        anchor_text: Raw anchor parameter text

    Returns:
        The resolved URL, or None if no absolute URL can be formed.
    """
    if base is None:
        return ResolvedUrl.parse(anchor_text)

    return ResolvedUrl.parse(resolve_reference(str(base), anchor_text))
