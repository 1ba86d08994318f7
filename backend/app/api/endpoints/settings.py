"""Client display settings endpoints."""

from dataclasses import asdict

from fastapi import APIRouter, Depends, Request

from app.core.rate_limit import RATE_LIMITS, limiter
from app.schemas.preferences import ClientSettingsResponse, ClientSettingsUpdate
from app.services.settings_store import SettingsStore, get_settings_store

router = APIRouter()


@router.get("", response_model=ClientSettingsResponse)
async def get_client_settings(store: SettingsStore = Depends(get_settings_store)):
    return asdict(store.state)


@router.patch("", response_model=ClientSettingsResponse)
@limiter.limit(RATE_LIMITS["preferences_update"])
async def update_client_settings(
    request: Request,
    data: ClientSettingsUpdate,
    store: SettingsStore = Depends(get_settings_store),
):
    """Apply the given fields; currency and theme are saved to disk."""
    if data.currency is not None:
        store.set_currency(data.currency)
    if data.theme is not None:
        store.set_theme(data.theme)
    if data.sidebar_open is not None:
        store.set_sidebar_open(data.sidebar_open)
    return asdict(store.state)
