import os
import sys
from types import SimpleNamespace

# Ensure project root is in sys.path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import httpx
import pytest

from config import Settings
from services.clevertap_client import CleverTapClient


class FakeBot:
    """Records outgoing Telegram messages instead of sending them."""

    def __init__(self, error=None):
        self.sent = []
        self.error = error

    async def send_message(self, **kwargs):
        self.sent.append(kwargs)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(**kwargs)


@pytest.fixture
def settings():
    return Settings(
        telegram_bot_token="123:abc",
        clevertap_account_id="TEST-ACC-ID",
        clevertap_passcode="TEST-PASS",
    )


@pytest.fixture
def clevertap(settings):
    """
    Returns a factory building a CleverTapClient on top of httpx.MockTransport.

    The factory takes the response status (or an exception to raise) and
    returns (client, requests) where `requests` collects every request made.
    """

    def _make(status=200, error=None):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if error is not None:
                raise error(request)
            return httpx.Response(status, json={"status": "success" if status == 200 else "fail"})

        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return CleverTapClient(settings, http_client=http), requests

    return _make


def make_update(text, user_id=42, first_name="Ann", last_name="Lee", username="annlee", chat_id=100):
    user = SimpleNamespace(
        id=user_id, first_name=first_name, last_name=last_name, username=username
    )
    message = SimpleNamespace(text=text, from_user=user, chat_id=chat_id)
    return SimpleNamespace(message=message)
