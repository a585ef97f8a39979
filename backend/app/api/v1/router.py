from fastapi import APIRouter

from app.api.v1.endpoints.dashboard import router as dashboard_router
from app.api.v1.endpoints.health import router as health_router
from app.api.v1.endpoints.stocks import router as stocks_router

api_router = APIRouter()
api_router.include_router(health_router, tags=["health"])
api_router.include_router(stocks_router, prefix="/stocks", tags=["stocks"])
api_router.include_router(dashboard_router, prefix="/dashboard", tags=["dashboard"])
