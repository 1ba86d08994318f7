"""Client display settings (currency, theme, sidebar) with a persisted subset.

Only ``currency`` and ``theme`` are written to disk; ``sidebar_open`` lives
for the process only. Stored values that are unknown or invalid are ignored
on load and the defaults apply.
"""

import json
import logging
from dataclasses import asdict, dataclass, replace
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

from app.core.config import settings

logger = logging.getLogger(__name__)

CURRENCIES = ("EUR", "USD")
THEMES = ("dark", "light")
PERSISTED_FIELDS = ("currency", "theme")

_ALLOWED = {"currency": CURRENCIES, "theme": THEMES}


@dataclass(frozen=True)
class ClientSettings:
    currency: str = "EUR"
    theme: str = "dark"
    sidebar_open: bool = False


Listener = Callable[[ClientSettings], None]


class SettingsStore:
    """Observable holder of ``ClientSettings``."""

    def __init__(self, path: Optional[Union[str, Path]] = None, defaults: Optional[ClientSettings] = None):
        self._path = Path(path) if path else None
        self._state = defaults or ClientSettings()
        self._listeners: List[Listener] = []

    @property
    def state(self) -> ClientSettings:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set(self, **changes) -> None:
        new_state = replace(self._state, **changes)
        if new_state == self._state:
            return
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)

    def set_currency(self, currency: str) -> None:
        if currency not in CURRENCIES:
            raise ValueError(f"Unsupported currency: {currency}")
        self._set(currency=currency)

    def set_theme(self, theme: str) -> None:
        if theme not in THEMES:
            raise ValueError(f"Unsupported theme: {theme}")
        self._set(theme=theme)

    def toggle_sidebar(self) -> None:
        self._set(sidebar_open=not self._state.sidebar_open)

    def set_sidebar_open(self, open_: bool) -> None:
        self._set(sidebar_open=bool(open_))

    # -- persistence -------------------------------------------------------

    def persisted(self) -> Dict[str, str]:
        state = asdict(self._state)
        return {key: state[key] for key in PERSISTED_FIELDS}

    def dump(self) -> None:
        if self._path is None:
            return
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(self.persisted()), encoding="utf-8")

    @classmethod
    def load(cls, path: Union[str, Path], defaults: Optional[ClientSettings] = None) -> "SettingsStore":
        """Restore the persisted subset over defaults; later changes are saved back."""
        store = cls(path, defaults)
        stored = store._read()
        restored = {
            key: value
            for key, value in stored.items()
            if key in PERSISTED_FIELDS and value in _ALLOWED[key]
        }
        if restored:
            store._state = replace(store._state, **restored)
        store.subscribe(lambda _state: store.dump())
        return store

    def _read(self) -> dict:
        if self._path is None or not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable preferences file %s: %s", self._path, e)
            return {}
        return data if isinstance(data, dict) else {}


_store: Optional[SettingsStore] = None


def get_settings_store() -> SettingsStore:
    """FastAPI dependency returning the process-wide store."""
    global _store
    if _store is None:
        currency = settings.DEFAULT_CURRENCY if settings.DEFAULT_CURRENCY in CURRENCIES else "EUR"
        _store = SettingsStore.load(settings.PREFERENCES_FILE, ClientSettings(currency=currency))
    return _store
