"""
services/clevertap_client.py
----------------------------
Thin async client for the CleverTap upload API.

Responsibilities:
    - Wrap one record in the batch envelope and POST it to /1/upload.
    - Attach the account id / passcode headers.
    - Turn every failure (encoding, network, timeout, non-200) into CleverTapError.

There are no retries: one call, one attempt.
"""

import asyncio
import json
from typing import Optional

import httpx

from config import Settings
from models.records import Record, build_envelope
from services.record_builder import build_event, build_profile
from utils.logger import get_logger

logger = get_logger(__name__)


class CleverTapError(Exception):
    """A single upload to CleverTap did not succeed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class CleverTapClient:
    """
    Sends profile and event records to CleverTap.

    One instance is created at startup and shared by all handlers; the
    underlying httpx.AsyncClient keeps no per-call state.
    """

    def __init__(self, settings: Settings, http_client: Optional[httpx.AsyncClient] = None):
        self.url = settings.upload_url
        self._headers = {
            "X-CleverTap-Account-Id": settings.clevertap_account_id,
            "X-CleverTap-Passcode": settings.clevertap_passcode,
            "Content-Type": "application/json; charset=utf-8",
        }
        self._http = http_client or httpx.AsyncClient(timeout=settings.request_timeout)
        self._timeout = settings.request_timeout

    async def upload(self, record: Record) -> None:
        """
        POST a single record wrapped in the {"d": [...]} envelope.

        Args:
            record: A ProfileRecord or EventRecord.

        Raises:
            CleverTapError: On serialization errors, transport errors,
                timeouts, or any status other than 200.
        """
        try:
            body = json.dumps(build_envelope(record), ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise CleverTapError(f"JSON encoding failed: {e}") from e

        try:
            # httpx timeouts are per phase; wait_for bounds the whole request.
            resp = await asyncio.wait_for(
                self._http.post(
                    self.url, content=body, headers=self._headers, timeout=self._timeout
                ),
                self._timeout,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            raise CleverTapError(f"Request to CleverTap timed out after {self._timeout}s") from e
        except httpx.HTTPError as e:
            raise CleverTapError(f"HTTP request to CleverTap failed: {e}") from e

        if resp.status_code != 200:
            raise CleverTapError(
                f"Unexpected status from CleverTap: {resp.status_code} {resp.reason_phrase}",
                status_code=resp.status_code,
            )

        logger.info("Data sent to CleverTap successfully.")

    async def upload_profile(
        self,
        user_id: int,
        first_name: Optional[str],
        last_name: Optional[str],
        username: Optional[str],
        chat_id: int,
    ) -> None:
        """Create or update the CleverTap profile of a Telegram user."""
        logger.info(f"Uploading profile for ID: {user_id}")
        record = build_profile(user_id, first_name, last_name, username, chat_id)
        await self.upload(record)

    async def push_event(self, identity: str, chat_id: int, event_name: str) -> None:
        """Push a custom event for an existing identity."""
        logger.info(f"Pushing event '{event_name}' for ID: {identity}")
        await self.upload(build_event(identity, chat_id, event_name))

    async def aclose(self) -> None:
        """Close the shared HTTP client."""
        await self._http.aclose()
