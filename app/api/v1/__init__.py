"""API v1 router aggregation."""

from fastapi import APIRouter

from app.api.v1.endpoints import analytics, health, records, streak

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(records.router, prefix="/users/{user_id}", tags=["records"])
api_router.include_router(streak.router, prefix="/users/{user_id}", tags=["streak"])
api_router.include_router(analytics.router, prefix="/users/{user_id}", tags=["analytics"])
