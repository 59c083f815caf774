"""Domain helpers for feedback records (entity, ids, email format)."""
from __future__ import annotations

import re
import secrets
import string
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Mapping

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_MESSAGE_LENGTH = 5
VOTE_ACTIONS = ("upvote", "downvote")

_BASE36 = string.digits + string.ascii_lowercase

# str.isspace() characters plus the byte order mark, which JS String.trim also drops
_TRIM_CHARS = "".join(ch for ch in map(chr, range(0x3001)) if ch.isspace()) + "\ufeff"


def _base36(value: int) -> str:
    if value <= 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def generate_id() -> str:
    """Millisecond clock in base36 followed by a random base36 suffix."""
    return _base36(int(time.time() * 1000)) + _base36(secrets.randbits(52))


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with milliseconds, e.g. 2026-10-19T12:00:00.123Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def trim(value: str) -> str:
    return value.strip(_TRIM_CHARS)


def is_valid_email(value: str | None) -> bool:
    if not value:
        return False
    return bool(EMAIL_PATTERN.match(value))


@dataclass
class FeedbackRecord:
    id: str
    name: str
    email: str
    message: str
    votes: int
    created_at: str

    @classmethod
    def create(cls, name: str, email: str, message: str) -> "FeedbackRecord":
        """Build a fresh record; callers pass already normalised values."""
        return cls(
            id=generate_id(),
            name=name,
            email=email,
            message=message,
            votes=0,
            created_at=utc_timestamp(),
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FeedbackRecord":
        votes = data.get("votes", 0)
        # bool is an int subclass; neither it nor floats/strings are valid counts
        if isinstance(votes, bool) or not isinstance(votes, int):
            raise TypeError(f"votes must be an integer, got {votes!r}")
        return cls(
            id=str(data["id"]),
            name=str(data.get("name") or ""),
            email=str(data.get("email") or ""),
            message=str(data.get("message") or ""),
            votes=votes,
            created_at=str(data.get("createdAt") or ""),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "message": self.message,
            "votes": self.votes,
            "createdAt": self.created_at,
        }
