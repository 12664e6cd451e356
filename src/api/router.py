from fastapi import APIRouter

from src.api.health.router import router as health_router
from src.api.messages.router import router as messages_router

# V1 API router
v1_router = APIRouter(prefix="/v1")

# Include domain routers
v1_router.include_router(messages_router)

# Main API router
api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(v1_router)
