"""Unit tests for button action dispatch."""
from unittest.mock import Mock

import pytest

from processor.actions import action_uri, dispatch
from processor.models import ButtonAction


class TestActions:
    """Test cases for action_uri and dispatch."""

    def test_link(self):
        assert action_uri(ButtonAction('link', 'https://zoom.us/j/1')) == 'https://zoom.us/j/1'

    def test_phone(self):
        assert action_uri(ButtonAction('phone', '5551234567,,9876')) == 'tel:5551234567,,9876'

    def test_email(self):
        assert action_uri(ButtonAction('email', 'a@b.com')) == 'mailto:a@b.com'

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            action_uri(ButtonAction('fax', '123'))

    def test_dispatch_uses_opener(self):
        opener = Mock(return_value=True)

        assert dispatch(ButtonAction('email', 'a@b.com'), opener) is True
        opener.assert_called_once_with('mailto:a@b.com')
