"""
Site settings store.

Key/value settings edited from the CMS. Without a configured database the
store starts from static defaults and keeps edits in memory.
"""
import logging
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_SITE_SETTINGS: dict[str, str] = {
    "site_name": "Portfolio",
    "site_description": "A passionate Web Developer building beautiful and functional web experiences.",
    "contact_email": "",
    "github_url": "",
    "linkedin_url": "",
}


class SiteSettingsStore:
    """In-memory key/value settings seeded from defaults."""

    def __init__(self, defaults: Optional[Mapping[str, str]] = None):
        self._values: dict[str, str] = dict(DEFAULT_SITE_SETTINGS if defaults is None else defaults)

    def all(self) -> dict[str, str]:
        return dict(self._values)

    def update(self, values: Mapping[str, str]) -> None:
        """Upsert each key."""
        self._values.update(values)
        keys = ", ".join(sorted(values)) or "(none)"
        logger.info(f"Updated site settings: {keys}")


_store = SiteSettingsStore()


def get_site_settings_store() -> SiteSettingsStore:
    return _store
