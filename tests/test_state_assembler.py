"""Unit tests for query-string parsing and state assembly."""
from dataclasses import FrozenInstanceError

import pytest

from processor.config import LoaderConfig
from processor.models import Meeting, State, Tag
from processor.query_string import parse_query_string
from processor.state_assembler import assemble_state, to_tags


class TestParseQueryString:
    """Test cases for parse_query_string."""

    def test_leading_question_mark(self):
        assert parse_query_string('?formats=foo,bar') == {'formats': ['foo', 'bar']}

    def test_multiple_pairs_percent_decoded(self):
        query = parse_query_string('days=Monday&types=Young%20People,LGBTQ%2B')

        assert query == {
            'days': ['Monday'],
            'types': ['Young People', 'LGBTQ+']
        }

    def test_encoded_comma_stays_in_value(self):
        assert parse_query_string('formats=a%2Cb,c') == {'formats': ['a,b', 'c']}

    def test_empty(self):
        assert parse_query_string('') == {}
        assert parse_query_string('?') == {}

    def test_malformed_pairs_ignored(self):
        assert parse_query_string('flag&=x&days=Friday') == {'days': ['Friday']}

    def test_unknown_keys_kept(self):
        assert parse_query_string('search=big+book') == {'search': ['big+book']}


class TestToTags:
    """Test cases for to_tags."""

    def test_checked_iff_selected(self):
        tags = to_tags(['bar', 'baz', 'foo'], ['foo', 'bar'])

        assert tags == (
            Tag(tag='bar', checked=True),
            Tag(tag='baz', checked=False),
            Tag(tag='foo', checked=True)
        )

    def test_selection_outside_vocabulary_ignored(self):
        assert to_tags(['a'], ['z']) == (Tag(tag='a', checked=False),)


class TestAssembleState:
    """Test cases for assemble_state."""

    def test_assembles_filters_and_defaults(self):
        config = LoaderConfig(meetings_per_page=10)
        meetings = [Meeting(name='One'), Meeting(name='Two')]

        state = assemble_state(
            config=config,
            meetings=meetings,
            formats=['bar', 'baz', 'foo'],
            types=['Men'],
            preselection={'formats': ['foo', 'bar'], 'days': ['Monday']},
            timezone='Europe/Rome'
        )

        assert list(state.filters) == ['days', 'formats', 'types']
        assert [tag.tag for tag in state.filters['days']] == list(config.days)
        assert [tag.tag for tag in state.filters['days'] if tag.checked] == ['Monday']
        assert [(tag.tag, tag.checked) for tag in state.filters['formats']] == [
            ('bar', True), ('baz', False), ('foo', True)
        ]
        assert state.filters['types'] == (Tag(tag='Men', checked=False),)
        assert state.limit == 10
        assert state.loading is False
        assert state.search == ()
        assert state.timezone == 'Europe/Rome'
        assert state.meetings == tuple(meetings)

    def test_to_dict(self):
        state = assemble_state(
            config=LoaderConfig(),
            meetings=[Meeting(name='One', tags=('Open',))],
            formats=['Open'],
            types=[],
            preselection={},
            timezone='UTC'
        )

        data = state.to_dict()

        assert data['filters']['formats'] == [{'tag': 'Open', 'checked': False}]
        assert data['filters']['types'] == []
        assert data['meetings'][0]['tags'] == ['Open']
        assert 'time' not in data['meetings'][0]
        assert data['loading'] is False
        assert data['search'] == []

    def test_state_is_read_only(self):
        """Test that filters cannot be replaced or changed in place."""
        filters = {'formats': (Tag(tag='Open'),)}
        state = assemble_state(
            config=LoaderConfig(),
            meetings=[Meeting(name='One')],
            formats=['Open'],
            types=[],
            preselection={},
            timezone='UTC'
        )

        with pytest.raises(TypeError):
            state.filters['formats'] = ()
        with pytest.raises(TypeError):
            del state.filters['days']
        with pytest.raises(FrozenInstanceError):
            state.filters = {}
        assert [tag.tag for tag in state.filters['formats']] == ['Open']

        direct = State(filters=filters, limit=1, meetings=[], timezone='UTC')
        filters['formats'] = ()
        assert direct.filters['formats'] == (Tag(tag='Open'),)
        assert direct.meetings == ()
