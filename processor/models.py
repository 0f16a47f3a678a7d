"""Data models for the meeting directory pipeline."""
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple


@dataclass(frozen=True)
class RowFields:
    """Trimmed field values extracted from one raw feed row."""
    name: str
    notes: str
    url: str
    phone: str
    access_code: str
    email: str
    formats: str
    types: str
    timezone: str
    times: str
    updated: str


@dataclass(frozen=True)
class ButtonAction:
    """What the host should do when a button is pressed."""
    kind: str  # link | phone | email
    target: str

    def to_dict(self) -> Dict[str, str]:
        return {'kind': self.kind, 'target': self.target}


@dataclass(frozen=True)
class ActionButton:
    """User-actionable contact channel attached to a meeting."""
    icon: str  # link | video | phone | email
    label: str
    title: str
    action: ButtonAction

    def to_dict(self) -> Dict[str, Any]:
        return {
            'icon': self.icon,
            'label': self.label,
            'title': self.title,
            'action': self.action.to_dict()
        }


@dataclass(frozen=True)
class Meeting:
    """Directory-ready meeting record; `time` is None for ongoing meetings."""
    name: str
    notes: Tuple[str, ...] = ()
    buttons: Tuple[ActionButton, ...] = ()
    tags: Tuple[str, ...] = ()
    search: str = ''
    updated: str = ''
    time: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'name': self.name,
            'notes': list(self.notes),
            'buttons': [button.to_dict() for button in self.buttons],
            'tags': list(self.tags),
            'search': self.search,
            'updated': self.updated
        }
        if self.time is not None:
            data['time'] = self.time.isoformat()
        return data


@dataclass(frozen=True)
class Tag:
    """Filter vocabulary entry."""
    tag: str
    checked: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {'tag': self.tag, 'checked': self.checked}


@dataclass(frozen=True)
class State:
    """Application state snapshot produced by one load."""
    filters: Mapping[str, Tuple[Tag, ...]]
    limit: int
    meetings: Tuple[Meeting, ...]
    timezone: str
    loading: bool = False
    search: Tuple[str, ...] = ()

    def __post_init__(self):
        # read-only view over a private copy
        object.__setattr__(self, 'filters', MappingProxyType(dict(self.filters)))
        object.__setattr__(self, 'meetings', tuple(self.meetings))
        object.__setattr__(self, 'search', tuple(self.search))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'filters': {
                category: [tag.to_dict() for tag in tags]
                for category, tags in self.filters.items()
            },
            'limit': self.limit,
            'loading': self.loading,
            'meetings': [meeting.to_dict() for meeting in self.meetings],
            'search': list(self.search),
            'timezone': self.timezone
        }


@dataclass
class LoadResult:
    """Result of a load: the state plus advisory row warnings."""
    state: State
    warnings: List[str] = field(default_factory=list)
