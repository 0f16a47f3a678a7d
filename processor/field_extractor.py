"""Field extraction from spreadsheet feed rows."""
from typing import Any, Dict, List, Mapping, Optional

from processor.errors import StructuralFieldMissing
from processor.models import RowFields

# RowFields attribute -> spreadsheet column key
FIELD_KEYS = {
    'name': 'gsx$name',
    'notes': 'gsx$notes',
    'url': 'gsx$url',
    'phone': 'gsx$phone',
    'access_code': 'gsx$accesscode',
    'email': 'gsx$email',
    'formats': 'gsx$formats',
    'types': 'gsx$types',
    'timezone': 'gsx$timezone',
    'times': 'gsx$times',
    'updated': 'updated'
}

TEXT_KEY = '$t'


def feed_entries(feed: Mapping[str, Any]) -> List[Dict[str, Any]]:
    """
    Return the list of row entries from a decoded feed document.

    Args:
        feed: Decoded JSON feed ({"feed": {"entry": [...]}})

    Returns:
        List of raw row mappings

    Raises:
        StructuralFieldMissing: If the feed has no entry list
    """
    try:
        entries = feed['feed']['entry']
    except (KeyError, TypeError):
        raise StructuralFieldMissing('feed.entry')
    if not isinstance(entries, list):
        raise StructuralFieldMissing('feed.entry')
    return entries


def extract_fields(
    row: Mapping[str, Any],
    row_index: Optional[int] = None
) -> RowFields:
    """
    Extract trimmed text values for every named field of a row.

    Args:
        row: Raw feed entry
        row_index: Zero-based position of the row, used in error messages

    Returns:
        RowFields with whitespace-trimmed values

    Raises:
        StructuralFieldMissing: If any field or its text node is absent
    """
    values = {}
    for attribute, key in FIELD_KEYS.items():
        try:
            text = row[key][TEXT_KEY]
        except (KeyError, TypeError):
            raise StructuralFieldMissing(key, row_index)
        if text is None:
            raise StructuralFieldMissing(key, row_index)
        values[attribute] = str(text).strip()
    return RowFields(**values)


def split_trimmed(text: str, sep: str = ',') -> List[str]:
    """Split "foo, bar, baz" into ["foo", "bar", "baz"], dropping empties."""
    return [value.strip() for value in text.split(sep) if value.strip()]
