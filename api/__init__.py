"""Feedback collection API (FastAPI app, JSON-file store)."""
