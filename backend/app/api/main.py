from fastapi import APIRouter

from app.api.routes import spells, subscriptions, utils

api_router = APIRouter()
api_router.include_router(utils.router)
api_router.include_router(spells.router)
api_router.include_router(subscriptions.router)
