"""Assembly of the application state snapshot."""
from typing import Dict, Iterable, List, Sequence, Tuple

from processor.config import LoaderConfig
from processor.models import Meeting, State, Tag

FILTER_CATEGORIES = ('days', 'formats', 'types')


def to_tags(vocabulary: Iterable[str], selected: Iterable[str]) -> Tuple[Tag, ...]:
    """Mark each vocabulary entry as checked iff it is in `selected`."""
    selected = set(selected)
    return tuple(Tag(tag=tag, checked=tag in selected) for tag in vocabulary)


def assemble_state(
    config: LoaderConfig,
    meetings: Sequence[Meeting],
    formats: Sequence[str],
    types: Sequence[str],
    preselection: Dict[str, List[str]],
    timezone: str
) -> State:
    """
    Combine pipeline output into the final State.

    Args:
        config: Loader configuration (day names, page size)
        meetings: Expanded meeting records, in feed order
        formats: Sorted format vocabulary
        types: Sorted type vocabulary
        preselection: Category -> values to mark as checked
        timezone: Best-guess local timezone of the viewer

    Returns:
        Immutable State snapshot
    """
    vocabularies = {
        'days': config.days,
        'formats': formats,
        'types': types
    }
    filters = {
        category: to_tags(vocabularies[category], preselection.get(category, []))
        for category in FILTER_CATEGORIES
    }
    return State(
        filters=filters,
        limit=config.meetings_per_page,
        meetings=tuple(meetings),
        timezone=timezone,
        loading=False,
        search=()
    )
