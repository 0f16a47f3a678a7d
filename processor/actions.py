"""Host-side dispatch of button actions."""
from typing import Callable

from processor.models import ButtonAction

URI_PREFIXES = {
    'link': '',
    'phone': 'tel:',
    'email': 'mailto:'
}


def action_uri(action: ButtonAction) -> str:
    """
    Return the URI a host opens for a button action.

    Raises:
        ValueError: If the action kind is unknown
    """
    try:
        prefix = URI_PREFIXES[action.kind]
    except KeyError:
        raise ValueError(f"Unknown action kind: {action.kind}")
    return prefix + action.target


def dispatch(action: ButtonAction, opener: Callable[[str], object]) -> object:
    """Open the action's URI with a host-supplied opener (e.g. webbrowser.open)."""
    return opener(action_uri(action))
