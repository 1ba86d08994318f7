"""Client settings schemas."""

from typing import Literal, Optional

from app.schemas.common import CamelModel


class ClientSettingsResponse(CamelModel):
    currency: Literal["EUR", "USD"]
    theme: Literal["dark", "light"]
    sidebar_open: bool


class ClientSettingsUpdate(CamelModel):
    currency: Optional[Literal["EUR", "USD"]] = None
    theme: Optional[Literal["dark", "light"]] = None
    sidebar_open: Optional[bool] = None
