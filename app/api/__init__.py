"""API routes."""

from fastapi import APIRouter

from app.api import auth, decisions, health

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, tags=["auth"])
router.include_router(decisions.router, prefix="/decisions", tags=["decisions"])
