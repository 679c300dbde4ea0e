"""Data models for toggle key reports."""

from pyxkeys.models.status import KeyState, KeyStatus

__all__ = [
    "KeyState",
    "KeyStatus",
]
