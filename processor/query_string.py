"""Parsing of filter preselections from a URL query string."""
import logging
from typing import Dict, List
from urllib.parse import unquote

logger = logging.getLogger(__name__)


def parse_query_string(query_string: str) -> Dict[str, List[str]]:
    """
    Parse "?days=Monday&formats=foo,bar" into {"days": [...], "formats": [...]}.

    Values are comma-separated and percent-decoded. Pairs without "=" or
    with an empty key are skipped; a repeated key keeps its last value.

    Args:
        query_string: Raw query string, with or without the leading "?"

    Returns:
        Mapping of key to list of decoded values
    """
    query = {}
    if query_string.startswith('?'):
        query_string = query_string[1:]
    if not query_string:
        return query

    for pair in query_string.split('&'):
        key, sep, value = pair.partition('=')
        if not sep or not key:
            logger.debug(f"Ignoring malformed query pair: {pair!r}")
            continue
        query[unquote(key)] = [unquote(part) for part in value.split(',')]

    return query
