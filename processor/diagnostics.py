"""Row-level warning collection."""
import logging
from typing import List

logger = logging.getLogger(__name__)


class Diagnostics:
    """Collects advisory warnings for a single load."""

    def __init__(self):
        self.warnings: List[str] = []

    def warn(self, value: str, kind: str, row_index: int) -> str:
        """
        Record that a field value is invalid.

        Args:
            value: Offending value as it appeared in the feed
            kind: Human-readable field kind ("URL", "phone number", ...)
            row_index: Zero-based row index; displayed with header offset

        Returns:
            The formatted warning line
        """
        message = f'Row {row_index + 2}: "{value}" is not a valid {kind}.'
        logger.warning(message)
        self.warnings.append(message)
        return message
