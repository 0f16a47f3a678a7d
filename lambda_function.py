"""AWS Lambda handler serving the meeting directory state."""
import json
import logging
import os
import time
from typing import Dict, Any
from urllib.parse import quote
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from feed.sheets_feed import SheetsFeedClient
from processor.config import LoaderConfig
from processor.meeting_loader import MeetingLoader


# Configure JSON logging
class JsonFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            'timestamp': self.formatTime(record),
            'level': record.levelname,
            'message': record.getMessage(),
            'logger': record.name
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def setup_logging(log_level: str = 'INFO') -> None:
    """
    Configure logging with JSON formatter.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    root_logger = logging.getLogger()

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    root_logger.addHandler(handler)

    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))


def get_query_string(event: Dict[str, Any]) -> str:
    """
    Return the raw query string of an API Gateway request.

    HTTP API (v2) events carry rawQueryString; REST API (v1) events only
    carry decoded queryStringParameters, which are re-encoded here.
    """
    if event.get('rawQueryString'):
        return event['rawQueryString']

    params = event.get('queryStringParameters') or {}
    return '&'.join(
        f"{quote(key)}={','.join(quote(value) for value in str(values).split(','))}"
        for key, values in params.items()
    )


def guess_timezone(event: Dict[str, Any], default_timezone: str) -> str:
    """
    Guess the viewer's timezone from the X-Timezone request header.

    Args:
        event: API Gateway event
        default_timezone: Zone used when the header is missing or unknown

    Returns:
        IANA zone name
    """
    headers = {
        key.lower(): value for key, value in (event.get('headers') or {}).items()
    }
    candidate = (headers.get('x-timezone') or '').strip()
    if candidate:
        try:
            ZoneInfo(candidate)
            return candidate
        except (ZoneInfoNotFoundError, ValueError, OSError):
            logging.getLogger(__name__).warning(
                f"Ignoring unknown timezone header: {candidate}"
            )
    return default_timezone


def error_response(message: str, error: Exception, start_time: float) -> Dict[str, Any]:
    duration = time.time() - start_time
    return {
        'statusCode': 500,
        'body': json.dumps({
            'message': message,
            'error': str(error),
            'error_type': type(error).__name__,
            'duration_seconds': round(duration, 2)
        })
    }


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Main Lambda handler: fetch the feed and return the directory state.

    Args:
        event: API Gateway event payload
        context: Lambda context object

    Returns:
        Response dict with statusCode and JSON body holding state and warnings
    """
    feed_url = os.environ.get('FEED_URL', '')
    log_level = os.environ.get('LOG_LEVEL', 'INFO')
    timeout_seconds = int(os.environ.get('TIMEOUT_SECONDS', '30'))

    setup_logging(log_level)
    logger = logging.getLogger(__name__)

    start_time = time.time()
    logger.info(
        "Lambda execution started",
        extra={'feed_url': feed_url, 'timeout_seconds': timeout_seconds}
    )

    if not feed_url:
        error = ValueError('FEED_URL environment variable is not set')
        logger.error(str(error))
        return error_response('Missing configuration', error, start_time)

    try:
        config = LoaderConfig.from_env()
        client = SheetsFeedClient(feed_url=feed_url, timeout=timeout_seconds)
        event = event or {}
        timezone = guess_timezone(event, config.default_timezone)
        loader = MeetingLoader(config=config, timezone_guesser=lambda: timezone)

        try:
            logger.info("Fetching meeting feed")
            feed = client.fetch_feed()
        except Exception as e:
            logger.error(
                f"Failed to fetch meeting feed after retries: {str(e)}",
                extra={'error_type': type(e).__name__},
                exc_info=True
            )
            return error_response('Failed to fetch meeting feed', e, start_time)

        logger.info("Loading meetings from feed")
        result = loader.load(feed, get_query_string(event))

        duration = time.time() - start_time
        logger.info(
            "Lambda execution completed successfully",
            extra={
                'duration_seconds': round(duration, 2),
                'meetings': len(result.state.meetings),
                'warnings': len(result.warnings)
            }
        )

        return {
            'statusCode': 200,
            'headers': {'Content-Type': 'application/json'},
            'body': json.dumps({
                'state': result.state.to_dict(),
                'warnings': result.warnings,
                'duration_seconds': round(duration, 2)
            })
        }

    except Exception as e:
        duration = time.time() - start_time
        logger.error(
            f"Lambda execution failed: {str(e)}",
            extra={
                'duration_seconds': round(duration, 2),
                'error_type': type(e).__name__
            },
            exc_info=True
        )
        return error_response('Load failed', e, start_time)
