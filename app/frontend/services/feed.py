"""Initial load of the event feed."""
import logging
import requests
from app.frontend.client import BackendClient, BackendError
from app.frontend.schemas import FeedResult

logger = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = "Could not load events. Try reloading the page."


def load_feed(client: BackendClient) -> FeedResult:
    """Fetch events for the feed. Failures yield an empty feed and a message."""
    try:
        events = client.list_events()
    except (BackendError, requests.RequestException, ValueError) as exc:
        logger.warning("Failed to load events: %s", exc)
        return FeedResult(events=[], error=FETCH_FAILED_MESSAGE)

    return FeedResult(events=sorted(events, key=lambda event: event.date))
