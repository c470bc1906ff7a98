from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from .errors import SettingsError

logger = logging.getLogger(__name__)

ENV_PREFIX = "LIGHT_EMITTER_"
SETTINGS_FILE_ENV = ENV_PREFIX + "SETTINGS_FILE"


def _as_bool(value: Any) -> bool:
    """Interpret common truthy/falsey values into a bool.

    Accepts: True/False, 1/0, "true"/"false", "yes"/"no", "on"/"off" (case-insensitive).
    Any other string is rejected.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        v = value.strip().lower()
        if v in {"1", "true", "yes", "y", "on"}:
            return True
        if v in {"0", "false", "no", "n", "off", ""}:
            return False
    raise SettingsError(f"not a boolean value: {value!r}")


@dataclass(frozen=True)
class EmitterSettings:
    """Behaviour switches for :class:`~light_emitter.registry.EventRegistry`.

    - pass_owner: prepend the owning host object to every listener call.
    - strict_callbacks: reject non-callable listeners at registration time
      instead of failing when they are dispatched.

    Settings can be read from a YAML file and from environment variables
    (prefix: LIGHT_EMITTER_); see :func:`load_settings`.
    """

    pass_owner: bool = False
    strict_callbacks: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EmitterSettings":
        allowed = {f.name for f in dataclasses.fields(cls)}
        unknown = set(data) - allowed
        if unknown:
            logger.warning("Ignoring unknown emitter settings: %s", ", ".join(sorted(map(str, unknown))))
        return cls(**{k: _as_bool(v) for k, v in data.items() if k in allowed})

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "EmitterSettings":
        """Load settings from a YAML mapping.

        An empty file yields the defaults.
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as exc:
            raise SettingsError(f"cannot read emitter settings from {path}: {exc}") from exc
        logger.debug("Loaded emitter settings from path: %s", path)
        if raw is None:
            return cls()
        if not isinstance(raw, dict):
            raise SettingsError(f"emitter settings in {path} must be a mapping, got {type(raw).__name__}")
        return cls.from_dict(raw)

    @classmethod
    def env_overrides(cls, env: Optional[Mapping[str, str]] = None) -> Dict[str, bool]:
        """Collect overrides from LIGHT_EMITTER_* variables."""
        env = os.environ if env is None else env
        overrides: Dict[str, bool] = {}
        for f in dataclasses.fields(cls):
            key = ENV_PREFIX + f.name.upper()
            if key in env:
                overrides[f.name] = _as_bool(env[key])
        return overrides

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "EmitterSettings":
        return cls(**cls.env_overrides(env))


def load_settings(
    path: Optional[Union[str, Path]] = None,
    env: Optional[Mapping[str, str]] = None,
) -> EmitterSettings:
    """Build settings from defaults, then a YAML file, then the environment.

    Args:
        path: YAML file to read. Defaults to LIGHT_EMITTER_SETTINGS_FILE when set.
        env: Environment mapping, ``os.environ`` if omitted.

    Returns:
        EmitterSettings: the merged settings.
    """
    env = os.environ if env is None else env
    if path is None:
        path = env.get(SETTINGS_FILE_ENV) or None
    settings = EmitterSettings.from_yaml(path) if path is not None else EmitterSettings()
    overrides = EmitterSettings.env_overrides(env)
    if overrides:
        settings = dataclasses.replace(settings, **overrides)
    logger.debug("Effective emitter settings: %s", settings)
    return settings
