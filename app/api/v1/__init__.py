"""API v1 routes."""

from fastapi import APIRouter

from app.api.v1 import admin, boards, health

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(boards.router, prefix="/boards", tags=["boards"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
