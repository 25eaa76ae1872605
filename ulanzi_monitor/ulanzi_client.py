"""
Client for pushing custom apps to an AWTRIX-flashed Ulanzi clock.
"""

import logging

import requests

from ulanzi_monitor.errors import TransportError
from ulanzi_monitor.schemas import UlanziPayload

logger = logging.getLogger(__name__)


class UlanziClient:
    """Pushes payloads to the clock's /api/custom endpoint."""

    def __init__(self, host: str, timeout: float = 10.0):
        """
        Args:
            host: Hostname or IP of the clock, e.g. "192.168.1.100"
            timeout: Per-request timeout in seconds
        """
        self.host = host
        self.timeout = timeout
        self.session = requests.Session()

    def push(self, app_name: str, payload: UlanziPayload) -> None:
        """
        Create or replace the named custom app.

        Raises:
            TransportError: If the clock cannot be reached or rejects the payload
        """
        url = f"http://{self.host}/api/custom"

        try:
            response = self.session.post(
                url,
                params={"name": app_name},
                json=payload.to_json(),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise TransportError(f"Could not reach Ulanzi at {self.host}: {e}") from e

        if not response.ok:
            raise TransportError(
                f"Ulanzi rejected app '{app_name}': {response.status_code} - {response.text}"
            )

        logger.info("Pushed app '%s' to Ulanzi", app_name)
