"""Client configuration for pyxkeys."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyxkeys.exceptions import XkeysConfigError

_TRUE_WORDS = frozenset({"1", "true", "yes", "y", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "n", "off"})


def _env_bool(name: str, value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_WORDS:
        return True
    if normalized in _FALSE_WORDS:
        return False
    raise XkeysConfigError(f"{name} must be a boolean, got {value!r}")


@dataclasses.dataclass(frozen=True)
class XkeysConfig:
    """Client configuration.

    Parameters
    ----------
    report_path : str or None
        Read ``xset q`` output from this file. When unset the default
        source reads standard input.
    encoding : str
        Encoding of the report file.
    trace_enabled : bool
        Log the raw report text at DEBUG level before parsing.
    """

    report_path: str | None = None
    encoding: str = "utf-8"
    trace_enabled: bool = False

    @classmethod
    def from_env(cls, **overrides: Any) -> XkeysConfig:
        """Create configuration from environment variables.

        Reads ``XKEYS_REPORT_PATH``, ``XKEYS_ENCODING`` and
        ``XKEYS_TRACE_ENABLED``. Explicit keyword arguments override
        environment values.

        Raises
        ------
        XkeysConfigError
            If ``XKEYS_TRACE_ENABLED`` is not a recognizable boolean.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "XKEYS_REPORT_PATH": "report_path",
            "XKEYS_ENCODING": "encoding",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        if "trace_enabled" not in overrides:
            config_kwargs["trace_enabled"] = _env_bool(
                "XKEYS_TRACE_ENABLED",
                env.get("XKEYS_TRACE_ENABLED"),
                False,
            )

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
