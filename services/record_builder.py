"""
services/record_builder.py
--------------------------
Pure functions that shape Telegram user data into CleverTap records.
No I/O happens here; missing optional fields are passed through as "".
"""

from typing import Optional

from models.records import EventRecord, ProfileRecord

EVENT_SOURCE = "TonWelcomeBot"


def identity_for(user_id: int) -> str:
    """CleverTap identity for a Telegram user: the decimal user id."""
    return str(int(user_id))


def build_profile(
    user_id: int,
    first_name: Optional[str],
    last_name: Optional[str],
    username: Optional[str],
    chat_id: int,
) -> ProfileRecord:
    """
    Build the profile record uploaded on /start.

    The display name is always "first last", joined with a space even if
    one of the parts is empty.
    """
    first = first_name or ""
    last = last_name or ""
    return ProfileRecord(
        identity=identity_for(user_id),
        name=f"{first} {last}",
        username=username or "",
        chat_id=chat_id,
        first_name=first,
        last_name=last,
    )


def build_event(
    identity: str, chat_id: int, event_name: str, source: str = EVENT_SOURCE
) -> EventRecord:
    """Build an event record for a button press."""
    return EventRecord(
        identity=identity,
        event_name=event_name,
        chat_id=chat_id,
        source=source,
    )
