from fastapi import APIRouter

from stock_api.api.v1.auth import router as auth_router
from stock_api.api.v1.health import router as health_router
from stock_api.api.v1.stocks import router as stocks_router

api_router = APIRouter()
api_router.include_router(health_router, tags=["health"])
api_router.include_router(auth_router, tags=["auth"])
api_router.include_router(stocks_router, prefix="/stocks", tags=["stocks"])
