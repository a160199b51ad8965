"""Factory helpers for wiring the graduation application."""

from .build_app import build_graduation_app

__all__ = [
    "build_graduation_app",
]
