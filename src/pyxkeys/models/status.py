"""Toggle key status model."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pyxkeys.ingestion.normalize import normalize_whitespace


class KeyState(StrEnum):
    """Reported state of a toggle key.

    Only ``"on"`` maps to :attr:`ON`; any other value resolves to
    :attr:`OFF` instead of raising ``ValueError``.
    """

    ON = "on"
    OFF = "off"

    @classmethod
    def _missing_(cls, value: object) -> KeyState:
        return cls.OFF


class KeyStatus(BaseModel):
    """State of a single toggle key as reported by ``xset q``.

    Parameters
    ----------
    name : str
        Key name as reported, e.g. ``"Caps Lock"``. Words are separated
        by single spaces.
    id : int
        Indicator number reported in front of the name.
    state : KeyState
        Whether the key is on or off.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    name: str
    id: int = Field(ge=0)
    state: KeyState

    @field_validator("name")
    @classmethod
    def _require_normalized_name(cls, value: str) -> str:
        if normalize_whitespace(value) != value:
            raise ValueError(f"name must be whitespace-normalized, got {value!r}")
        return value

    @property
    def is_on(self) -> bool:
        """Whether the key is currently on."""
        return self.state is KeyState.ON
