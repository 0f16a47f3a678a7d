"""Static configuration for the meeting loader."""
import os
from dataclasses import dataclass, field, replace
from typing import Dict, List, Tuple

DAYS = (
    'Sunday',
    'Monday',
    'Tuesday',
    'Wednesday',
    'Thursday',
    'Friday',
    'Saturday'
)

MEETINGS_PER_PAGE = 25

# Display name -> hostname suffixes; first match wins
VIDEO_SERVICES = {
    'Google Meet': ['meet.google.com'],
    'GoToMeeting': ['gotomeeting.com', 'gotomeet.me'],
    'Jitsi': ['meet.jit.si'],
    'Microsoft Teams': ['teams.microsoft.com', 'teams.live.com'],
    'Skype': ['skype.com'],
    'WebEx': ['webex.com'],
    'Zoom': ['zoom.us', 'zoom.com']
}

DEFAULT_TIMEZONE = 'UTC'


@dataclass(frozen=True)
class LoaderConfig:
    """Configuration consumed by the loader pipeline."""
    days: Tuple[str, ...] = DAYS
    meetings_per_page: int = MEETINGS_PER_PAGE
    video_services: Dict[str, List[str]] = field(
        default_factory=lambda: dict(VIDEO_SERVICES)
    )
    default_timezone: str = DEFAULT_TIMEZONE
    url_title: str = 'Visit {url}'
    phone_label: str = 'Phone'
    phone_title: str = 'Call {phone}'
    email_label: str = 'Email'
    email_title: str = 'Email {email}'

    @classmethod
    def from_env(cls, environ=None) -> 'LoaderConfig':
        """
        Build configuration from environment variables.
        
        Args:
            environ: Mapping to read from (default: os.environ)
            
        Returns:
            LoaderConfig with MEETINGS_PER_PAGE and DEFAULT_TIMEZONE applied
        """
        environ = os.environ if environ is None else environ
        config = cls()
        return replace(
            config,
            meetings_per_page=int(
                environ.get('MEETINGS_PER_PAGE', config.meetings_per_page)
            ),
            default_timezone=environ.get(
                'DEFAULT_TIMEZONE', config.default_timezone
            )
        )
