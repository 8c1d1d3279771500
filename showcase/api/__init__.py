"""API routes."""

from fastapi import APIRouter

from showcase.api import admin, auth, comments, health, projects

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, tags=["auth"])
router.include_router(projects.router, prefix="/projects", tags=["projects"])
router.include_router(comments.router, prefix="/comments", tags=["comments"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
