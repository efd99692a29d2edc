"""
API router aggregation.
"""
from fastapi import APIRouter

from app.api.endpoints import auth, cms

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(auth.router)

api_router.include_router(
    cms.router,
    prefix="/cms",
    tags=["CMS"],
)
