from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from api.repositories.feedback_store import FeedbackStore
from api.services.feedback_service import FeedbackError, FeedbackService

router = APIRouter(prefix="/feedback", tags=["feedback"])
logger = logging.getLogger(__name__)


def get_feedback_store(request: Request) -> FeedbackStore:
    store = getattr(getattr(request.app, "state", None), "feedback_store", None)
    if store is None:
        raise RuntimeError("FeedbackStore not configured")
    return store


def get_feedback_service(store: FeedbackStore = Depends(get_feedback_store)) -> FeedbackService:
    return FeedbackService(store)


def _is_json(request: Request) -> bool:
    media_type = (request.headers.get("content-type") or "").split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


async def read_json_body(request: Request) -> dict[str, Any]:
    """Parsed JSON object body; non-JSON, empty or non-object bodies read as {}.

    Malformed JSON raises and is left to the app-level error boundary.
    """
    if not _is_json(request):
        return {}
    raw = await request.body()
    if not raw.strip():
        return {}
    payload = await request.json()
    return payload if isinstance(payload, dict) else {}


def envelope(
    status_code: int = 200,
    *,
    success: bool = True,
    message: str | None = None,
    data: Any = None,
    count: int | None = None,
    error: str | None = None,
) -> JSONResponse:
    body: dict[str, Any] = {"success": success}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    if count is not None:
        body["count"] = count
    if error is not None:
        body["error"] = error
    return JSONResponse(body, status_code=status_code)


def _error_response(err: FeedbackError) -> JSONResponse:
    return envelope(err.status_code, success=False, message=err.message)


def _failure(message: str, exc: Exception) -> JSONResponse:
    logger.error("%s: %s", message, exc, exc_info=exc)
    return envelope(500, success=False, message=message, error=str(exc))


@router.get("")
def list_feedback(service: FeedbackService = Depends(get_feedback_service)):
    try:
        items = [record.to_dict() for record in service.list_feedback()]
    except Exception as exc:
        return _failure("Error retrieving feedback", exc)
    return envelope(data=items, count=len(items))


@router.post("")
def create_feedback(
    payload: dict = Depends(read_json_body),
    service: FeedbackService = Depends(get_feedback_service),
):
    try:
        record = service.submit(payload)
    except FeedbackError as exc:
        return _error_response(exc)
    except Exception as exc:
        return _failure("Error creating feedback", exc)
    return envelope(201, message="Feedback submitted successfully", data=record.to_dict())


@router.put("/{feedback_id}/vote")
def vote_feedback(
    feedback_id: str,
    payload: dict = Depends(read_json_body),
    service: FeedbackService = Depends(get_feedback_service),
):
    action = payload.get("action")
    try:
        record = service.vote(feedback_id, action)
    except FeedbackError as exc:
        return _error_response(exc)
    except Exception as exc:
        return _failure("Error updating vote", exc)
    return envelope(message=f"Feedback {action}d successfully", data=record.to_dict())


@router.delete("/{feedback_id}")
def delete_feedback(feedback_id: str, service: FeedbackService = Depends(get_feedback_service)):
    try:
        record = service.delete(feedback_id)
    except FeedbackError as exc:
        return _error_response(exc)
    except Exception as exc:
        return _failure("Error deleting feedback", exc)
    return envelope(message="Feedback deleted successfully", data=record.to_dict())
