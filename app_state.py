# app_state.py
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, List, TypeVar

from storage import DEFAULT_CONFIG, ensure_data_files, load_config, save_config

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Observable(Generic[T]):
    """
    latest-value pub-sub:
    subscribers get the current value immediately, then every change
    """
    def __init__(self, initial: T):
        self._value = initial
        self._subscribers: List[Callable[[T], None]] = []

    @property
    def value(self) -> T:
        return self._value

    def subscribe(self, fn: Callable[[T], None]) -> Callable[[], None]:
        """register fn and hand it the current value; returns an unsubscribe callable"""
        self._subscribers.append(fn)
        self._deliver(fn, self._value)

        def unsubscribe() -> None:
            if fn in self._subscribers:
                self._subscribers.remove(fn)
        return unsubscribe

    def set(self, value: T) -> None:
        if value == self._value:
            return
        self._value = value
        for fn in list(self._subscribers):
            self._deliver(fn, value)

    def _deliver(self, fn: Callable[[T], None], value: T) -> None:
        try:
            fn(value)
        except Exception:
            logger.exception("subscriber %r failed", fn)


@dataclass
class AppState:
    """Holds the app configuration loaded from data/config.json."""
    config: Dict[str, Any] = field(default_factory=lambda: load_config())

    def __post_init__(self) -> None:
        for key, value in DEFAULT_CONFIG.items():
            self.config.setdefault(key, value)

    @classmethod
    def load(cls) -> "AppState":
        ensure_data_files()
        return cls()

    @property
    def theme(self) -> str:
        return str(self.config.get("theme", DEFAULT_CONFIG["theme"]))

    @property
    def log_level(self) -> str:
        return str(self.config.get("log_level", DEFAULT_CONFIG["log_level"])).upper()

    # ---------- persistence helpers ----------
    def save_config(self) -> None:
        save_config(self.config)
