"""FastAPI adapter serving one local checkers game as JSON."""

from __future__ import annotations

from importlib import import_module

__all__ = ["GameSession", "app", "create_app"]


def __getattr__(name: str):
    if name == "GameSession":
        return import_module(".session", __name__).GameSession
    if name in ("app", "create_app"):
        return getattr(import_module(".app", __name__), name)
    raise AttributeError(name)
