"""Parse a Link header value."""

from ...utils.configure_logging import configure_logging
from ...utils.get_logger import get_logger
from ..config.ParserConfig import ParserConfig
from ..tokenizer.tokenize import tokenize
from ..types.ResolvedUrl import ResolvedUrl
from .assemble_header import assemble_header
from .Header import Header


def parse(
    text: str,
    base: str | ResolvedUrl | None = None,
    config: ParserConfig | None = None,
) -> Header:
    """Parse an RFC 8288 Link header value.

    Args:
        text: The header field value
        base: Absolute URL ``anchor`` params resolve against, and the context
            of links without one. Overrides ``config.base_url``.
        config: Optional parser configuration

    Returns:
        The parsed Header. Parsing is all-or-nothing: no partial header is
        returned on failure.

    Raises:
        TokenizeError: If the text does not match the Link header grammar
        DecodeError: If a UTF-8 extended value is not valid UTF-8
        ValueError: If the base URL is not absolute
    """
    if config is not None:
        configure_logging(config.log_level, config.log_file)
        if base is None:
            base = config.base_url
    logger = get_logger("parse")

    if isinstance(base, str):
        resolved = ResolvedUrl.parse(base)
        if resolved is None:
            raise ValueError(f"Base URL must be absolute: {base}")
        base = resolved

    try:
        header = assemble_header(tokenize(text), base)
    except Exception as e:
        logger.debug(f"Failed to parse Link header {text!r}: {e}")
        raise

    logger.debug(f"Parsed {len(header)} links from Link header")
    return header
