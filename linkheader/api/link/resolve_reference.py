"""URI reference resolution (RFC 3986 section 5.2), for any scheme."""

import re

# RFC 3986 appendix B; unmatched groups are undefined components
URI_REFERENCE_PATTERN = re.compile(r"^(?:([^:/?#]+):)?(?://([^/?#]*))?([^?#]*)(?:\?([^#]*))?(?:#(.*))?$", re.DOTALL)


def resolve_reference(base: str, reference: str) -> str:
    """Resolve ``reference`` against the absolute URI ``base``.

    Unlike ``urllib.parse.urljoin`` this does not depend on a list of known
    schemes: ``coap://example.org/a/`` + ``b`` is ``coap://example.org/a/b``.

    Args:
        base: Absolute base URI
        reference: Absolute or relative URI reference

    Returns:
        The target URI as text. It is not validated.
    """
    b_scheme, b_authority, b_path, b_query, _ = URI_REFERENCE_PATTERN.match(base).groups()  # type: ignore[union-attr]
    r_scheme, r_authority, r_path, r_query, r_fragment = URI_REFERENCE_PATTERN.match(reference).groups()  # type: ignore[union-attr]

    if r_scheme is not None:
        scheme, authority, path, query = r_scheme, r_authority, remove_dot_segments(r_path), r_query
    elif r_authority is not None:
        scheme, authority, path, query = b_scheme, r_authority, remove_dot_segments(r_path), r_query
    elif r_path == "":
        scheme, authority, path = b_scheme, b_authority, b_path
        query = r_query if r_query is not None else b_query
    elif r_path.startswith("/"):
        scheme, authority, path, query = b_scheme, b_authority, remove_dot_segments(r_path), r_query
    else:
        scheme, authority, query = b_scheme, b_authority, r_query
        path = remove_dot_segments(_merge(b_authority, b_path, r_path))

    result = f"{scheme}:" if scheme is not None else ""
    if authority is not None:
        result += f"//{authority}"
    result += path
    if query is not None:
        result += f"?{query}"
    if r_fragment is not None:
        result += f"#{r_fragment}"
    return result


def _merge(base_authority: str | None, base_path: str, reference_path: str) -> str:
    if base_authority is not None and base_path == "":
        return f"/{reference_path}"
    return base_path[: base_path.rfind("/") + 1] + reference_path


def remove_dot_segments(path: str) -> str:
    """Remove "." and ".." segments from a path (RFC 3986 section 5.2.4)."""
    output: list[str] = []
    while path:
        if path.startswith("../"):
            path = path[3:]
        elif path.startswith("./"):
            path = path[2:]
        elif path.startswith("/./"):
            path = path[2:]
        elif path == "/.":
            path = "/"
        elif path.startswith("/../"):
            path = path[3:]
            if output:
                output.pop()
        elif path == "/..":
            path = "/"
            if output:
                output.pop()
        elif path in (".", ".."):
            path = ""
        else:
            # Move the first segment, with its leading "/", to the output
            end = path.find("/", 1)
            if end == -1:
                end = len(path)
            output.append(path[:end])
            path = path[end:]
    return "".join(output)
