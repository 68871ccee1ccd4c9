"""
models/records.py
-----------------
Domain models for the two record shapes accepted by the CleverTap upload API.

A Record is either a ProfileRecord or an EventRecord. Each one knows its own
wire representation; `build_envelope` wraps a single record in the batch
envelope expected by POST /1/upload.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class ProfileRecord:
    """
    Snapshot of a Telegram user's profile.

    Attributes:
        identity: CleverTap identity (decimal Telegram user id).
        name: Display name, "first last".
        username: Telegram handle without "@", may be empty.
        chat_id: Telegram chat the user talks to the bot in.
        first_name: Telegram first name.
        last_name: Telegram last name, may be empty.
    """
    identity: str
    name: str
    username: str
    chat_id: int
    first_name: str
    last_name: str

    type = "profile"

    def to_payload(self) -> dict:
        return {
            "type": self.type,
            "identity": self.identity,
            "profileData": {
                "Name": self.name,
                "tg_username": self.username,
                "tg_chat_id": self.chat_id,
                "tg_first_name": self.first_name,
                "tg_last_name": self.last_name,
            },
        }


@dataclass(frozen=True)
class EventRecord:
    """A named event raised by a user, e.g. a keyboard button press."""
    identity: str
    event_name: str
    chat_id: int
    source: str

    type = "event"

    def to_payload(self) -> dict:
        return {
            "type": self.type,
            "identity": self.identity,
            "evtName": self.event_name,
            "evtData": {
                "tg_chat_id": self.chat_id,
                "source": self.source,
            },
        }


Record = Union[ProfileRecord, EventRecord]


def build_envelope(record: Record) -> dict:
    """Wrap exactly one record in the `{"d": [...]}` batch envelope."""
    return {"d": [record.to_payload()]}
