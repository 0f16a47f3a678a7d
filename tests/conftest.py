"""Shared fixtures for meeting loader tests."""
from datetime import datetime, timezone

import pytest

# 2024-01-15 is a Monday
FIXED_NOW = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


def build_row(**overrides):
    """Build a raw spreadsheet feed entry; keyword names match column keys."""
    values = {
        'name': 'Monday Night Group',
        'notes': '',
        'url': '',
        'phone': '',
        'accesscode': '',
        'email': '',
        'formats': '',
        'types': '',
        'timezone': 'America/New_York',
        'times': '',
        'updated': '2024-01-10T10:00:00.000Z'
    }
    values.update(overrides)
    row = {
        f'gsx${key}': {'$t': value}
        for key, value in values.items()
        if key != 'updated'
    }
    row['updated'] = {'$t': values['updated']}
    return row


def build_feed(*rows):
    return {'feed': {'entry': list(rows)}}


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def make_row():
    return build_row


@pytest.fixture
def make_feed():
    return build_feed
