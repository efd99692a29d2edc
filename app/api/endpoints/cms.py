"""
CMS content endpoints.

Reads are public; writes require an authenticated admin session.
"""
import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from app.core.dependencies import require_admin
from app.core.security import Identity
from app.schemas.site_settings import UpdateResult
from app.services.site_settings import SiteSettingsStore, get_site_settings_store

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/settings", response_model=dict[str, str])
async def read_site_settings(
    store: Annotated[SiteSettingsStore, Depends(get_site_settings_store)],
):
    """Return all site settings as a key/value mapping."""
    return store.all()


@router.put("/settings", response_model=UpdateResult)
async def update_site_settings(
    values: dict[str, str],
    admin: Annotated[Identity, Depends(require_admin)],
    store: Annotated[SiteSettingsStore, Depends(get_site_settings_store)],
):
    """Upsert the submitted settings."""
    store.update(values)
    logger.info(f"Site settings updated by '{admin.username}'")
    return UpdateResult(success=True)
