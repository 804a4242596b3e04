"""API v1 router."""
from fastapi import APIRouter

from certprep.api.v1 import admin, auth, certifications, progress, questions, sessions

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
api_router.include_router(certifications.router, prefix="/certifications", tags=["Certifications"])
api_router.include_router(questions.router, prefix="/questions", tags=["Questions"])
api_router.include_router(sessions.router, prefix="/sessions", tags=["Practice Sessions"])
api_router.include_router(progress.router, prefix="/progress", tags=["Progress"])
api_router.include_router(admin.router, prefix="/admin", tags=["Admin"])
