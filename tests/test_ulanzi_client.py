"""
Tests for the Ulanzi push client.
"""

from unittest.mock import patch, MagicMock

import pytest
import requests

from ulanzi_monitor.errors import TransportError
from ulanzi_monitor.render import build_pr_payload
from ulanzi_monitor.ulanzi_client import UlanziClient


class TestUlanziClient:
    """Tests for UlanziClient.push."""

    @patch("requests.Session.post")
    def test_push_posts_custom_app(self, mock_post):
        """Should POST the payload to /api/custom with the app name."""
        mock_post.return_value = MagicMock(ok=True, status_code=200)

        client = UlanziClient("192.168.1.100")
        client.push("github", build_pr_payload(2))

        args, kwargs = mock_post.call_args
        assert args[0] == "http://192.168.1.100/api/custom"
        assert kwargs["params"] == {"name": "github"}
        assert kwargs["json"]["icon"] == "55529"
        assert kwargs["json"]["text"][1] == {"t": "PRs", "c": "#FFFFFF"}

    @patch("requests.Session.post")
    def test_push_omits_unset_fields(self, mock_post):
        mock_post.return_value = MagicMock(ok=True, status_code=200)

        UlanziClient("clock.local").push("github", build_pr_payload(0))

        assert mock_post.call_args[1]["json"] == {"text": "No PRs", "icon": "55529"}

    @patch("requests.Session.post")
    def test_push_rejected(self, mock_post):
        """Non-2xx answers should raise TransportError."""
        mock_post.return_value = MagicMock(ok=False, status_code=500, text="boom")

        client = UlanziClient("clock.local")

        with pytest.raises(TransportError, match="500"):
            client.push("github", build_pr_payload(1))

    @patch("requests.Session.post")
    def test_push_unreachable(self, mock_post):
        mock_post.side_effect = requests.Timeout("timed out")

        client = UlanziClient("clock.local")

        with pytest.raises(TransportError, match="clock.local"):
            client.push("github", build_pr_payload(1))
