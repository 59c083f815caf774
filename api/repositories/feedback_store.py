"""In-memory feedback collection mirrored to a JSON file."""
from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import List, Optional

from api.domain.feedback import FeedbackRecord
from api.repositories import json_storage

logger = logging.getLogger(__name__)


class FeedbackStore:
    """Authoritative list of feedback records plus its on-disk mirror.

    The in-memory list is the source of truth. Every mutation rewrites the
    whole file; if that write fails the error propagates and memory keeps the
    mutation (no rollback). Mutations run under a lock so overlapping requests
    served from the thread pool cannot interleave their file writes.
    """

    def __init__(self, data_file: Path) -> None:
        self.data_file = Path(data_file)
        self._items: List[FeedbackRecord] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._items)

    # -------------------------- persistence --------------------------
    def load(self) -> int:
        """Read the backing file; absent or unreadable files start empty."""
        if not self.data_file.exists():
            logger.info("No existing data file found, starting with empty data")
        try:
            raw = json_storage.load(self.data_file)
        except (OSError, ValueError) as exc:
            logger.warning("Could not read %s (%s); starting with empty data", self.data_file, exc)
            raw = []

        items: List[FeedbackRecord] = []
        seen: set[str] = set()
        for entry in raw:
            try:
                record = FeedbackRecord.from_dict(entry)
            except (KeyError, TypeError, ValueError, AttributeError) as exc:
                logger.warning("Skipping malformed feedback entry %r: %s", entry, exc)
                continue
            if record.id in seen:
                logger.warning("Skipping duplicate feedback id %s", record.id)
                continue
            seen.add(record.id)
            items.append(record)

        with self._lock:
            self._items = items
        logger.info("Loaded %d feedback entries from %s", len(items), self.data_file)
        return len(items)

    def persist(self) -> None:
        payload = [item.to_dict() for item in self._items]
        try:
            json_storage.save(self.data_file, payload)
        except OSError:
            logger.exception("Error saving data to %s", self.data_file)
            raise
        logger.debug("Data saved to %s (%d entries)", self.data_file, len(payload))

    # -------------------------- queries --------------------------
    def find_by_id(self, feedback_id: str) -> Optional[FeedbackRecord]:
        for item in self._items:
            if item.id == feedback_id:
                return item
        return None

    def list_sorted_by_votes(self) -> List[FeedbackRecord]:
        with self._lock:
            snapshot = list(self._items)
        # sorted() is stable: ties keep insertion order
        return sorted(snapshot, key=lambda item: item.votes, reverse=True)

    # -------------------------- mutations --------------------------
    def append(self, record: FeedbackRecord) -> FeedbackRecord:
        with self._lock:
            self._items.append(record)
            self.persist()
        return record

    def vote(self, feedback_id: str, direction: str) -> Optional[FeedbackRecord]:
        if direction not in ("upvote", "downvote"):
            raise ValueError(f"unknown vote direction: {direction!r}")
        with self._lock:
            record = self.find_by_id(feedback_id)
            if record is None:
                return None
            record.votes += 1 if direction == "upvote" else -1
            self.persist()
            return record

    def delete(self, feedback_id: str) -> Optional[FeedbackRecord]:
        with self._lock:
            for index, item in enumerate(self._items):
                if item.id == feedback_id:
                    break
            else:
                return None
            removed = self._items.pop(index)
            self.persist()
            return removed
