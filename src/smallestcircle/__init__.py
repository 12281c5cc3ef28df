"""Smallest enclosing circle of a 2D point set."""

from __future__ import annotations

from importlib import import_module
from typing import Any

from .geometry import EPSILON, Circle, Point

__all__ = [
    "EPSILON",
    "Circle",
    "Point",
    "make_circle",
    "make_circle_trials",
    "minimum_enclosing_disk",
]

_LAZY = {"make_circle", "make_circle_trials", "minimum_enclosing_disk"}


def __getattr__(name: str) -> Any:  # pragma: no cover - simple lazy import shim
    if name in _LAZY:
        module = import_module("smallestcircle.core")
        return getattr(module, name)
    raise AttributeError(f"module 'smallestcircle' has no attribute {name!r}")


def __dir__() -> list[str]:  # pragma: no cover - cosmetic helper
    return sorted(__all__)
