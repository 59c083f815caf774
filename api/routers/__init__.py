"""
FastAPI routers grouped by domain (feedback, health).

Each module exposes an APIRouter that app.create_app includes.
"""
