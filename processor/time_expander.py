"""Expansion of recurring meeting times into concrete occurrences."""
import logging
from dataclasses import replace
from datetime import datetime, timezone as dt_timezone, tzinfo
from typing import Dict, List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil.relativedelta import relativedelta, weekday, MO, TU, WE, TH, FR, SA, SU

from processor.config import LoaderConfig
from processor.diagnostics import Diagnostics
from processor.field_extractor import split_trimmed
from processor.models import Meeting

logger = logging.getLogger(__name__)

# Configured day names start on Sunday
SUNDAY_FIRST_WEEKDAYS = (SU, MO, TU, WE, TH, FR, SA)

TIME_FORMATS = [
    '%I:%M %p',      # 7:00 pm
    '%I:%M%p',       # 7:00pm
    '%I %p',         # 7 pm
    '%I%p',          # 7pm
    '%H:%M',         # 19:00
]


class TimeExpander:
    """Expands a meeting into one record per recurring time expression."""

    def __init__(
        self,
        config: LoaderConfig,
        diagnostics: Diagnostics,
        now: datetime
    ):
        """
        Initialize the expander.

        Args:
            config: Loader configuration (day names, default timezone)
            diagnostics: Warning collector for the current load
            now: Timezone-aware reference instant occurrences resolve from
        """
        self.config = config
        self.diagnostics = diagnostics
        self.now = now
        self.default_zone = ZoneInfo(config.default_timezone)
        self.weekdays = self._build_weekday_lookup(config.days)

    def expand(
        self,
        meeting: Meeting,
        times: str,
        timezone: str,
        row_index: int
    ) -> List[Meeting]:
        """
        Expand a meeting by its newline-separated time expressions.

        Args:
            meeting: Meeting with every field but `time` populated
            times: Raw times field
            timezone: IANA zone name the times are expressed in
            row_index: Zero-based row index for warnings

        Returns:
            One meeting per valid expression, or the meeting alone (ongoing)
            when no expression is valid
        """
        expressions = split_trimmed(times, '\n')
        if not expressions:
            return [meeting]

        zone = self.resolve_zone(timezone, row_index)
        occurrences = []
        for expression in expressions:
            occurrence = self.parse_occurrence(expression, zone)
            if occurrence is None:
                self.diagnostics.warn(expression, 'time', row_index)
                continue
            occurrences.append(replace(meeting, time=occurrence))

        if not occurrences:
            logger.info(
                f"Row {row_index + 2}: no valid times, listing as ongoing"
            )
            return [meeting]
        return occurrences

    def resolve_zone(self, timezone: str, row_index: int) -> tzinfo:
        """Return the row's zone, falling back to the default with a warning."""
        try:
            return ZoneInfo(timezone)
        except (ZoneInfoNotFoundError, ValueError, OSError):
            self.diagnostics.warn(timezone, 'timezone', row_index)
            return self.default_zone

    def parse_occurrence(
        self,
        expression: str,
        zone: tzinfo
    ) -> Optional[datetime]:
        """
        Resolve "Monday 7:00 pm" to its next occurrence in a zone.

        The occurrence is the first instant at or after the reference time
        that falls on the given weekday and wall-clock time.

        Args:
            expression: Weekday name followed by a time of day
            zone: Zone the wall-clock time is interpreted in

        Returns:
            Timezone-aware datetime or None if the expression is invalid
        """
        parts = expression.split(None, 1)
        if len(parts) != 2:
            return None

        weekday = self.weekdays.get(parts[0].rstrip(',').lower())
        if weekday is None:
            return None

        time_of_day = self._parse_time_of_day(parts[1])
        if time_of_day is None:
            return None

        local_now = self.now.astimezone(zone)
        base = local_now.replace(
            hour=time_of_day.hour,
            minute=time_of_day.minute,
            second=0,
            microsecond=0
        )
        occurrence = base + relativedelta(weekday=weekday)
        if occurrence < local_now:
            occurrence = base + relativedelta(days=1, weekday=weekday)
        # normalize wall times skipped by a DST transition
        return occurrence.astimezone(dt_timezone.utc).astimezone(zone)

    def _parse_time_of_day(self, time_str: str) -> Optional[datetime]:
        time_str = time_str.strip()

        for fmt in TIME_FORMATS:
            try:
                return datetime.strptime(time_str, fmt)
            except ValueError:
                continue

        return None

    def _build_weekday_lookup(self, days) -> Dict[str, weekday]:
        lookup = {}
        for name, day in zip(days, SUNDAY_FIRST_WEEKDAYS):
            lookup[name.lower()] = day
            lookup.setdefault(name[:3].lower(), day)
        return lookup
