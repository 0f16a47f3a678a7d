"""Meeting loader: transforms a raw feed into the directory state."""
import logging
from datetime import datetime, timezone
from typing import Any, Callable, List, Mapping, Optional

from processor.config import LoaderConfig
from processor.contact_classifier import ContactClassifier
from processor.diagnostics import Diagnostics
from processor.errors import StructuralFieldMissing
from processor.field_extractor import extract_fields, feed_entries, split_trimmed
from processor.models import LoadResult, Meeting
from processor.query_string import parse_query_string
from processor.search_index import build_search_index
from processor.state_assembler import assemble_state
from processor.tag_aggregator import TagAggregator
from processor.time_expander import TimeExpander

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class MeetingLoader:
    """Runs the feed-to-state pipeline, once per load."""

    def __init__(
        self,
        config: Optional[LoaderConfig] = None,
        clock: Callable[[], datetime] = utc_now,
        timezone_guesser: Optional[Callable[[], str]] = None
    ):
        """
        Initialize the loader.

        Args:
            config: Loader configuration (default: LoaderConfig())
            clock: Returns the timezone-aware reference instant
            timezone_guesser: Returns the viewer's zone name
                (default: the configured default timezone)
        """
        self.config = config or LoaderConfig()
        self.clock = clock
        self.timezone_guesser = (
            timezone_guesser or (lambda: self.config.default_timezone)
        )

    def load(self, feed: Mapping[str, Any], query_string: str = '') -> LoadResult:
        """
        Transform a decoded feed into a State snapshot.

        All accumulators are local to this call, so concurrent loads are
        independent.

        Args:
            feed: Decoded JSON feed document
            query_string: Raw query string carrying filter preselections

        Returns:
            LoadResult with the state and any row warnings
        """
        diagnostics = Diagnostics()
        aggregator = TagAggregator()
        classifier = ContactClassifier(self.config, diagnostics)
        expander = TimeExpander(self.config, diagnostics, self.clock())
        meetings: List[Meeting] = []

        try:
            entries = feed_entries(feed)
        except StructuralFieldMissing as e:
            logger.error(f"Feed has no rows: {e}")
            entries = []

        skipped = 0
        for row_index, row in enumerate(entries):
            try:
                meetings.extend(
                    self._load_row(row, row_index, classifier, aggregator, expander)
                )
            except StructuralFieldMissing as e:
                logger.error(f"Skipping row: {e}")
                skipped += 1
                continue

        formats, types = aggregator.vocabularies()
        state = assemble_state(
            config=self.config,
            meetings=meetings,
            formats=formats,
            types=types,
            preselection=parse_query_string(query_string),
            timezone=self.timezone_guesser()
        )

        logger.info(
            f"Loaded {len(meetings)} meetings from {len(entries)} rows "
            f"({skipped} skipped, {len(diagnostics.warnings)} warnings)"
        )
        return LoadResult(state=state, warnings=diagnostics.warnings)

    def _load_row(
        self,
        row: Mapping[str, Any],
        row_index: int,
        classifier: ContactClassifier,
        aggregator: TagAggregator,
        expander: TimeExpander
    ) -> List[Meeting]:
        fields = extract_fields(row, row_index)

        buttons = classifier.classify(
            url=fields.url,
            phone=fields.phone,
            access_code=fields.access_code,
            email=fields.email,
            row_index=row_index
        )
        tags = aggregator.add(
            split_trimmed(fields.formats),
            split_trimmed(fields.types)
        )

        meeting = Meeting(
            name=fields.name,
            notes=tuple(split_trimmed(fields.notes, '\n')),
            buttons=tuple(buttons),
            tags=tags,
            search=build_search_index(fields.name),
            updated=fields.updated
        )

        return expander.expand(meeting, fields.times, fields.timezone, row_index)
