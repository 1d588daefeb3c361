# spg/config.py
"""
Package settings for SPG.
Defaults are merged with an optional JSON file and then with SPG_* environment variables.
"""

import os
import json
import logging
from dataclasses import dataclass
from typing import Dict, Any, Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "unbiased": False,     # secure mode: rejection sampling instead of byte % len
    "strict_safe": False,  # reject falsy non-bool values for config.safe
    "log_level": "WARNING",
}

ENV_PREFIX = "SPG_"
_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}
_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


@dataclass(frozen=True)
class Settings:
    unbiased: bool = DEFAULTS["unbiased"]
    strict_safe: bool = DEFAULTS["strict_safe"]
    log_level: str = DEFAULTS["log_level"]


def _read_file(path: str) -> Dict[str, Any]:
    if not os.path.exists(path):
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("could not read settings from %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("settings file %s does not hold a JSON object, ignoring", path)
        return {}
    return data


def _read_env(env: Mapping[str, str]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for key in ("unbiased", "strict_safe"):
        raw = env.get(ENV_PREFIX + key.upper())
        if raw is not None:
            out[key] = raw.strip().lower() in _TRUTHY
    level = env.get(ENV_PREFIX + "LOG_LEVEL")
    if level:
        out["log_level"] = level.strip().upper()
    return out


def _as_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        flag = value.strip().lower()
        if flag in _TRUTHY:
            return True
        if flag in _FALSY:
            return False
    logger.warning("ignoring setting %s=%r, expected a boolean", key, value)
    return DEFAULTS[key]


def _as_level(value: Any) -> str:
    level = str(value).strip().upper()
    if level not in _LEVELS:
        logger.warning("ignoring unknown log level %r", value)
        return DEFAULTS["log_level"]
    return level


def load_config(path: Optional[str] = None, env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from DEFAULTS, the JSON object at `path` (if given) and the environment.
    Later sources win. Unknown keys are ignored.
    """
    cfg = DEFAULTS.copy()
    if path:
        cfg.update({k: v for k, v in _read_file(path).items() if k in DEFAULTS})
    cfg.update(_read_env(os.environ if env is None else env))
    return Settings(
        unbiased=_as_bool("unbiased", cfg["unbiased"]),
        strict_safe=_as_bool("strict_safe", cfg["strict_safe"]),
        log_level=_as_level(cfg["log_level"]),
    )
