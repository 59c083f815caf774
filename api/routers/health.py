from fastapi import APIRouter, Depends

from api.domain.feedback import utc_timestamp
from api.repositories.feedback_store import FeedbackStore
from api.routers.feedback import get_feedback_store

router = APIRouter(tags=["health"])


@router.get("/health")
def health(store: FeedbackStore = Depends(get_feedback_store)):
    return {
        "success": True,
        "message": "Server is running",
        "timestamp": utc_timestamp(),
        "dataFile": str(store.data_file),
        "feedbackCount": len(store),
    }
