from __future__ import annotations

import re

import pytest

from api.repositories.feedback_store import FeedbackStore
from api.services.feedback_service import (
    INVALID_ACTION_MESSAGE,
    INVALID_EMAIL_MESSAGE,
    REQUIRED_FIELDS_MESSAGE,
    SHORT_MESSAGE_MESSAGE,
    FeedbackNotFoundError,
    FeedbackService,
    FeedbackValidationError,
)


@pytest.fixture()
def service(data_file):
    store = FeedbackStore(data_file)
    store.load()
    return FeedbackService(store)


def _payload(**overrides):
    payload = {"name": "Alice", "email": "alice@example.com", "message": "Great product"}
    payload.update(overrides)
    return payload


@pytest.mark.parametrize(
    "overrides",
    [
        {"name": ""},
        {"name": "   "},
        {"email": None},
        {"message": 12345},
    ],
)
def test_required_fields(service, overrides):
    with pytest.raises(FeedbackValidationError) as exc:
        service.submit(_payload(**overrides))
    assert exc.value.message == REQUIRED_FIELDS_MESSAGE
    assert exc.value.status_code == 400
    assert service.count() == 0


@pytest.mark.parametrize("email", ["not-an-email", "a@b", "a b@c.d", "@example.com", "a@@b.c"])
def test_invalid_email(service, email):
    with pytest.raises(FeedbackValidationError) as exc:
        service.submit(_payload(email=email))
    assert exc.value.message == INVALID_EMAIL_MESSAGE


def test_message_length_counts_trimmed_text(service):
    with pytest.raises(FeedbackValidationError) as exc:
        service.submit(_payload(message="  hi  "))
    assert exc.value.message == SHORT_MESSAGE_MESSAGE

    record = service.submit(_payload(message="hello"))
    assert record.message == "hello"


def test_submit_normalises_fields(service):
    record = service.submit(_payload(name="  Alice ", email="  Alice@Example.COM ", message="  Nice work!  "))
    assert record.name == "Alice"
    assert record.email == "alice@example.com"
    assert record.message == "Nice work!"
    assert record.votes == 0
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", record.created_at)


def test_duplicate_emails_are_allowed(service):
    service.submit(_payload())
    service.submit(_payload())
    assert service.count() == 2


@pytest.mark.parametrize("action", [None, "", "UPVOTE", "like", ["upvote"]])
def test_vote_rejects_invalid_action(service, action):
    record = service.submit(_payload())
    with pytest.raises(FeedbackValidationError) as exc:
        service.vote(record.id, action)
    assert exc.value.message == INVALID_ACTION_MESSAGE
    assert record.votes == 0


def test_invalid_action_checked_before_id(service):
    with pytest.raises(FeedbackValidationError):
        service.vote("missing", "sideways")


def test_vote_and_delete_unknown_id(service):
    with pytest.raises(FeedbackNotFoundError) as exc:
        service.vote("missing", "upvote")
    assert exc.value.status_code == 404
    with pytest.raises(FeedbackNotFoundError):
        service.delete("missing")


def test_byte_order_mark_is_trimmed(service):
    with pytest.raises(FeedbackValidationError) as exc:
        service.submit(_payload(name="\ufeff"))
    assert exc.value.message == REQUIRED_FIELDS_MESSAGE

    record = service.submit(_payload(name="\ufeff Alice \u00a0", message="\ufeffhello\ufeff"))
    assert record.name == "Alice"
    assert record.message == "hello"
