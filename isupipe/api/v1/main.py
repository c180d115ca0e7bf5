from fastapi import APIRouter

from isupipe.api.v1.endpoints import reactions


api_router = APIRouter()

api_router.include_router(reactions.router, prefix="/livestreams", tags=["reactions"])
