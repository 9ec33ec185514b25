"""API v1 router initialization."""
from fastapi import APIRouter

from .face_match import router as face_match_router

# Create v1 router
router = APIRouter()

# Include face match endpoints
router.include_router(
    face_match_router,
    prefix="/face-match",
    tags=["face-match"]
)
