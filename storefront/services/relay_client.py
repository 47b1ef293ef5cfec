# storefront/services/relay_client.py
import requests
from requests import RequestException

from storefront.domain.errors import RelayError
from storefront.utils.logging import get_logger
from storefront.utils.settings import CONTACT_RELAY_URL, RELAY_TIMEOUT_SECONDS

logger = get_logger(__name__)


class RelayClient:
    """Forwards contact submissions to a Formspree-style form endpoint."""

    def __init__(self, url: str | None = None, timeout: int | None = None, session: requests.Session | None = None):
        self.url = CONTACT_RELAY_URL if url is None else url
        self.timeout = timeout or RELAY_TIMEOUT_SECONDS
        self.session = session or requests.Session()

    @property
    def enabled(self) -> bool:
        return bool(self.url)

    def forward(self, name: str, email: str, subject: str, message: str):
        logger.info(f"RelayClient POST {self.url}")
        try:
            resp = self.session.post(
                self.url,
                json={
                    "name": name,
                    "_replyto": email,
                    "_subject": subject,
                    "message": message,
                },
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
        except RequestException as e:
            raise RelayError(f"Failed to send message: {e}") from e

        if not resp.ok:
            raise RelayError(f"Relay error: {resp.text}")
