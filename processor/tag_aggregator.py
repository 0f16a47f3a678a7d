"""Aggregation of format and type tags across feed rows."""
from typing import Iterable, List, Tuple


class TagAggregator:
    """
    Accumulates distinct format and type tokens for a single load.

    One instance per load; never share an aggregator between loads.
    """

    def __init__(self):
        self.formats = set()
        self.types = set()

    def add(self, formats: Iterable[str], types: Iterable[str]) -> Tuple[str, ...]:
        """
        Record a row's tokens and return that row's tags.

        Args:
            formats: Format tokens of the row
            types: Type tokens of the row

        Returns:
            Row tags, formats first then types, without duplicates
        """
        formats = list(formats)
        types = list(types)
        self.formats.update(formats)
        self.types.update(types)
        return tuple(dict.fromkeys(formats + types))

    def vocabularies(self) -> Tuple[List[str], List[str]]:
        """Return (formats, types), each sorted by ordinal comparison."""
        return sorted(self.formats), sorted(self.types)
