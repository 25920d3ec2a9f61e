"""Runtime configuration for the kernel.

Configuration is a frozen dataclass. It can be built from a mapping, loaded from
a YAML file, or taken from the process default (`default_config()`), which reads
the file named by ``FPTENSOR_CONFIG`` when that variable is set.

Example file::

    default_format: FP8x23
    step_limit: 1000000
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

logger = logging.getLogger(__name__)

ENV_CONFIG_PATH = "FPTENSOR_CONFIG"

# Kept as plain strings so this module has no dependency on the number kernel;
# `fptensor.numbers.formats` resolves them against the format table.
KNOWN_FORMATS = ("FP8x23", "FP16x16")

_KEYS = frozenset({"default_format", "step_limit"})


@dataclass(frozen=True)
class KernelConfig:
    """Process-wide kernel settings."""

    default_format: str = "FP16x16"
    step_limit: Optional[int] = None  # None = unlimited


def config_from_dict(obj: Mapping[str, Any]) -> KernelConfig:
    if not isinstance(obj, Mapping):
        raise TypeError("config must be a mapping")
    unknown = sorted(set(obj) - _KEYS)
    if unknown:
        raise ValueError(f"unknown config keys: {', '.join(unknown)}")

    fmt = obj.get("default_format", KernelConfig.default_format)
    if not isinstance(fmt, str) or fmt not in KNOWN_FORMATS:
        raise ValueError(f"default_format must be one of {KNOWN_FORMATS}: {fmt!r}")

    limit = obj.get("step_limit")
    if limit is not None:
        if not isinstance(limit, int) or isinstance(limit, bool):
            raise TypeError("step_limit must be an int or null")
        if limit < 0:
            raise ValueError("step_limit must be non-negative")

    return KernelConfig(default_format=fmt, step_limit=limit)


def load_config(path: str | Path) -> KernelConfig:
    """Load a `KernelConfig` from a YAML file. An empty file yields the defaults."""
    path = Path(path)
    obj = yaml.safe_load(path.read_text(encoding="utf-8"))
    if obj is None:
        obj = {}
    cfg = config_from_dict(obj)
    logger.debug("loaded kernel config from %s: %s", path, cfg)
    return cfg


@lru_cache(maxsize=1)
def default_config() -> KernelConfig:
    path = os.environ.get(ENV_CONFIG_PATH)
    if not path:
        return KernelConfig()
    return load_config(path)
