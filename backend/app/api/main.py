from fastapi import APIRouter

from app.api.routes import calculate, catalog, preferences

api_router = APIRouter()
api_router.include_router(calculate.router)
api_router.include_router(catalog.router)
api_router.include_router(preferences.router)
