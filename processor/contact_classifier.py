"""Classification of URL, phone and email fields into action buttons."""
import logging
import re
from typing import List, Optional
from urllib.parse import urlsplit

from processor.config import LoaderConfig
from processor.diagnostics import Diagnostics
from processor.models import ActionButton, ButtonAction

logger = logging.getLogger(__name__)

MIN_PHONE_DIGITS = 9
ACCESS_CODE_SEPARATOR = ',,'

EMAIL_PATTERN = re.compile(
    r'^(([^<>()\[\]\\.,;:\s@"]+(\.[^<>()\[\]\\.,;:\s@"]+)*)|(".+"))'
    r'@((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\])'
    r'|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))$'
)


class ContactClassifier:
    """Turns contact fields into typed buttons, warning on bad values."""

    def __init__(self, config: LoaderConfig, diagnostics: Diagnostics):
        self.config = config
        self.diagnostics = diagnostics

    def classify(
        self,
        url: str,
        phone: str,
        access_code: str,
        email: str,
        row_index: int
    ) -> List[ActionButton]:
        """
        Build the buttons for one row, in url, phone, email order.

        Args:
            url: Trimmed URL field
            phone: Trimmed phone field
            access_code: Trimmed access code field
            email: Trimmed email field
            row_index: Zero-based row index for warnings

        Returns:
            List of zero to three ActionButton objects
        """
        buttons = []
        for button in (
            self.url_button(url, row_index),
            self.phone_button(phone, access_code, row_index),
            self.email_button(email, row_index)
        ):
            if button:
                buttons.append(button)
        return buttons

    def url_button(self, url: str, row_index: int) -> Optional[ActionButton]:
        if not url:
            return None

        hostname = parse_hostname(url)
        if not hostname:
            self.diagnostics.warn(url, 'URL', row_index)
            return None

        service = self.match_video_service(hostname)
        if service:
            icon, label = 'video', service
        else:
            icon = 'link'
            label = hostname[4:] if hostname.startswith('www.') else hostname

        return ActionButton(
            icon=icon,
            label=label,
            title=self.config.url_title.format(url=url),
            action=ButtonAction(kind='link', target=url)
        )

    def phone_button(
        self,
        phone: str,
        access_code: str,
        row_index: int
    ) -> Optional[ActionButton]:
        if not phone:
            return None

        digits = re.sub(r'\D', '', phone)
        if len(digits) < MIN_PHONE_DIGITS:
            self.diagnostics.warn(phone, 'phone number', row_index)
            return None

        target = digits
        if access_code:
            target += ACCESS_CODE_SEPARATOR + access_code

        return ActionButton(
            icon='phone',
            label=self.config.phone_label,
            title=self.config.phone_title.format(phone=target),
            action=ButtonAction(kind='phone', target=target)
        )

    def email_button(self, email: str, row_index: int) -> Optional[ActionButton]:
        if not email:
            return None

        if not validate_email(email):
            self.diagnostics.warn(email, 'email address', row_index)
            return None

        return ActionButton(
            icon='email',
            label=self.config.email_label,
            title=self.config.email_title.format(email=email),
            action=ButtonAction(kind='email', target=email)
        )

    def match_video_service(self, hostname: str) -> Optional[str]:
        """Return the first configured service whose domain suffixes the host."""
        for service, domains in self.config.video_services.items():
            if any(hostname.endswith(domain) for domain in domains):
                return service
        return None


def parse_hostname(url: str) -> Optional[str]:
    """
    Parse an absolute URL and return its hostname.

    Returns:
        Lowercase hostname, or None if the value is not an absolute URL
    """
    if any(char.isspace() for char in url):
        return None
    try:
        parts = urlsplit(url)
        hostname = parts.hostname
        # raises ValueError on a malformed port
        _ = parts.port
    except ValueError as e:
        logger.debug(f"URL parse failed for {url!r}: {e}")
        return None
    if not parts.scheme or not hostname:
        return None
    return hostname


def validate_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.match(email))
