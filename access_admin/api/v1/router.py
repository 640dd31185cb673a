"""API v1 router aggregation."""

from fastapi import APIRouter

from access_admin.api.v1.endpoints import health

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
