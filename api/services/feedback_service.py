"""Feedback use cases (submit, vote, delete, list)."""

from __future__ import annotations

from typing import Any, List, Mapping

from api.domain.feedback import (
    MIN_MESSAGE_LENGTH,
    VOTE_ACTIONS,
    FeedbackRecord,
    is_valid_email,
    trim,
)
from api.repositories.feedback_store import FeedbackStore

REQUIRED_FIELDS_MESSAGE = "Name, email, and message are required fields"
INVALID_EMAIL_MESSAGE = "Please provide a valid email address"
SHORT_MESSAGE_MESSAGE = f"Feedback message must be at least {MIN_MESSAGE_LENGTH} characters long"
INVALID_ACTION_MESSAGE = 'Action must be either "upvote" or "downvote"'
NOT_FOUND_MESSAGE = "Feedback not found"


class FeedbackError(Exception):
    def __init__(self, message: str, code: str = "invalid", status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


class FeedbackValidationError(FeedbackError):
    """Raised when a submitted field or vote action breaks a rule."""

    def __init__(self, message: str):
        super().__init__(message, "invalid", 400)


class FeedbackNotFoundError(FeedbackError):
    """Raised when a vote/delete targets an unknown id."""

    def __init__(self, feedback_id: str):
        super().__init__(NOT_FOUND_MESSAGE, "not_found", 404)
        self.feedback_id = feedback_id


def _text(payload: Mapping[str, Any], key: str) -> str:
    value = payload.get(key)
    if not isinstance(value, str):
        return ""
    return trim(value)


class FeedbackService:
    def __init__(self, store: FeedbackStore) -> None:
        self.store = store

    def list_feedback(self) -> List[FeedbackRecord]:
        return self.store.list_sorted_by_votes()

    def submit(self, payload: Mapping[str, Any]) -> FeedbackRecord:
        name = _text(payload, "name")
        email = _text(payload, "email")
        message = _text(payload, "message")
        if not (name and email and message):
            raise FeedbackValidationError(REQUIRED_FIELDS_MESSAGE)
        if not is_valid_email(email):
            raise FeedbackValidationError(INVALID_EMAIL_MESSAGE)
        if len(message) < MIN_MESSAGE_LENGTH:
            raise FeedbackValidationError(SHORT_MESSAGE_MESSAGE)
        record = FeedbackRecord.create(name=name, email=email.lower(), message=message)
        return self.store.append(record)

    def vote(self, feedback_id: str, action: Any) -> FeedbackRecord:
        if action not in VOTE_ACTIONS:
            raise FeedbackValidationError(INVALID_ACTION_MESSAGE)
        record = self.store.vote(feedback_id, action)
        if record is None:
            raise FeedbackNotFoundError(feedback_id)
        return record

    def delete(self, feedback_id: str) -> FeedbackRecord:
        record = self.store.delete(feedback_id)
        if record is None:
            raise FeedbackNotFoundError(feedback_id)
        return record

    def count(self) -> int:
        return len(self.store)
