"""API v1 router configuration."""

from fastapi import APIRouter

from medbill.api.v1.endpoints import classification, health

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(
    classification.router,
    tags=["classification"],
)

api_router.include_router(
    health.router,
    tags=["health"],
)
